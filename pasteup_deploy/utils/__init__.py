"""Utility helpers for pasteup-deploy"""

from .async_utils import run_async, join_all
from .file_utils import copy_tree, remove_tree, is_within

__all__ = [
    'run_async',
    'join_all',
    'copy_tree',
    'remove_tree',
    'is_within',
]
