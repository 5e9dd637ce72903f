#!/usr/bin/env python3
"""Run the object versioning walkthrough against the configured bucket.

Usage:
  DEMO_BUCKET=my-bucket DEMO_FILE_PATH=./myimage.png .venv/bin/python scripts/versioning_demo.py

Credentials and region come from the environment or a local .env file.
"""

from __future__ import annotations

import sys

from s3versioning.demo import main

if __name__ == "__main__":
    sys.exit(main())
