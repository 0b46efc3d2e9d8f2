"""Interactive utilities for the CLI"""

from rich.console import Console

from ...constants import MSG_CONFIRM_VERSION, MSG_CONFIRM_PROMPT


def read_line(console: Console) -> str:
    """Read one line from stdin, treating end of input as an empty answer"""
    try:
        return console.input()
    except EOFError:
        return ""


def confirm_version(console: Console, version: str) -> bool:
    """Ask the operator to confirm the version about to be deployed

    Only an answer of exactly ``y`` (surrounding whitespace ignored)
    confirms.
    """
    console.print()
    console.print(MSG_CONFIRM_VERSION.format(version=version), markup=False, highlight=False)
    console.print(MSG_CONFIRM_PROMPT, markup=False, highlight=False)
    return read_line(console).strip() == "y"
