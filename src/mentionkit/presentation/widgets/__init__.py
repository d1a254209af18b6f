"""Textual widgets for mention editing."""

from .autocomplete import MentionAutoComplete

__all__ = ["MentionAutoComplete"]
