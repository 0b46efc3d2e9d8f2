"""Command-line interface for pasteup-deploy"""

from .main import cli, main

__all__ = ['cli', 'main']
