"""
Cursor-relative mention tokenization.

This package finds the token the cursor sits in, decides whether it is a
valid explicit (``@john``) or implicit (``john``) mention and turns it into
a :class:`~mentionkit.domain.types.QueryToken`.
"""

from .characters import is_digit, is_letter, is_letter_or_digit
from .config import DEFAULT_CONFIG, TokenizerConfig
from .regions import SpanIndex
from .token_source import TextTokenSource, TokenWindow, find_token_window, query_token_for, token_from_window
from .word_tokenizer import NO_TOKEN, WordTokenizer

__all__ = [
    "is_digit",
    "is_letter",
    "is_letter_or_digit",
    "DEFAULT_CONFIG",
    "TokenizerConfig",
    "SpanIndex",
    "TextTokenSource",
    "TokenWindow",
    "find_token_window",
    "query_token_for",
    "token_from_window",
    "NO_TOKEN",
    "WordTokenizer",
]
