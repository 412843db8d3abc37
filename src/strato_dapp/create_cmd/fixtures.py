"""Locate and copy the bundled project fixtures."""

import os
import shutil
import sys
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "framework"


def copy_fixture_tree(source_dir, target_dir):
    """Copy every file under source_dir into target_dir.

    Existing directories are merged; files with the same name are overwritten.
    """
    if not os.path.isdir(source_dir):
        print(f"Error: fixture directory not found: {source_dir}", file=sys.stderr)
        raise SystemExit(1)
    shutil.copytree(
        source_dir,
        target_dir,
        dirs_exist_ok=True,
        ignore=shutil.ignore_patterns("__pycache__"),
    )
