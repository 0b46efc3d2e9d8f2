"""CLI utility functions"""

from .interactive import confirm_version, read_line
from .output import format_dry_run, print_error

__all__ = [
    'confirm_version',
    'read_line',
    'format_dry_run',
    'print_error',
]
