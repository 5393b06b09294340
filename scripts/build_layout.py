#!/usr/bin/env python3
"""Regenerate MSFS_C152/layout.json and MSFS_C152/manifest.json.

Takes no arguments: the content root, manifest-base.json and package.json
are resolved against the project directory above this script.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from msfs_layout.cli import main  # noqa: E402


if __name__ == "__main__":
    main(["--root", str(ROOT)])
