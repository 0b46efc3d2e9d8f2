# pasteup_deploy/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import Callable, List, Optional, Set


def copy_tree(src: Path,
              dst: Path,
              exclude: Optional[List[Path]] = None) -> Path:
    """
    Recursively copy a directory tree

    Args:
        src: Source directory
        dst: Destination directory (must not exist)
        exclude: Absolute paths inside ``src`` to skip entirely

    Returns:
        Destination path
    """
    ignore = _ignore_paths(exclude) if exclude else None
    shutil.copytree(src, dst, symlinks=False, ignore=ignore)
    return dst


def _ignore_paths(paths: List[Path]) -> Callable[[str, List[str]], Set[str]]:
    """Build a ``shutil.copytree`` ignore callback for specific paths"""
    excluded = {os.path.realpath(p) for p in paths}

    def ignore(directory: str, names: List[str]) -> Set[str]:
        return {
            name for name in names
            if os.path.realpath(os.path.join(directory, name)) in excluded
        }

    return ignore


def remove_tree(path: Path, missing_ok: bool = True) -> bool:
    """
    Remove a directory tree

    Args:
        path: Directory to remove
        missing_ok: Do not fail if the directory does not exist

    Returns:
        True if something was removed
    """
    if not path.exists():
        if missing_ok:
            return False
        raise FileNotFoundError(f"Directory not found: {path}")

    shutil.rmtree(path)
    return True


def is_within(path: Path, parent: Path) -> bool:
    """Check whether ``path`` lies inside ``parent``"""
    try:
        Path(os.path.realpath(path)).relative_to(os.path.realpath(parent))
        return True
    except ValueError:
        return False
