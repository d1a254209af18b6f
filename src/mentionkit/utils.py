"""
Utility functions for mentionkit.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/mentionkit).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def clamp_cursor(text: str, cursor: int) -> int:
    """Return ``cursor`` if it lies within ``[0, len(text)]``, otherwise ``0``."""
    if cursor < 0 or cursor > len(text):
        return 0
    return cursor
