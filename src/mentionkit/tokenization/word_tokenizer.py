"""
Word tokenizer used to find the keywords to query mention suggestions with.

The tokenizer works relative to the cursor. Given the full text, the cursor
offset and the committed mention regions it finds the bounds of the word (or
words) the cursor sits in and decides whether they form an explicit mention
(introduced by a trigger character such as ``@``) or an implicit one (a long
enough bare word).

Searches never cross a line separator or reach into a committed mention.
None of the operations raise for bad input: out-of-range cursors are clamped
to ``0`` and anything unexpected degrades to "no token".
"""

from __future__ import annotations

from typing import Iterable

from mentionkit.domain.types.tokens import CommittedMentionRegion
from mentionkit.logger import get_logger
from mentionkit.utils import clamp_cursor

from .characters import is_letter_or_digit
from .config import DEFAULT_CONFIG, TokenizerConfig
from .regions import SpanIndex

logger = get_logger("tokenizer")

Regions = SpanIndex | Iterable[CommittedMentionRegion] | None

NO_TOKEN = -1
"""Returned by :meth:`WordTokenizer.find_token_start` when no start can be found."""


class WordTokenizer:
    """Tokenizer splitting text on configurable word-break characters.

    Args:
        config: Parsing options, shared by reference
        regions: Default committed mention regions. Every operation also
            accepts ``regions`` to override them for a single call.
    """

    def __init__(self, config: TokenizerConfig | None = None, regions: Regions = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._regions = SpanIndex.coerce(regions)

    def _index(self, regions: Regions) -> SpanIndex:
        if regions is None:
            return self._regions
        return SpanIndex.coerce(regions)

    # ------------------------------------------------------------------
    # Tokenizer protocol
    # ------------------------------------------------------------------

    def find_token_start(self, text: str, cursor: int, regions: Regions = None) -> int:
        """Return the index of the first character of the token at ``cursor``.

        Explicit tokens start at their trigger character. Implicit tokens
        start up to ``max_keywords`` words before the cursor. Returns
        ``NO_TOKEN`` (-1) if the position is explicit but no trigger can be
        located, which callers must treat as "no token".
        """
        index = self._index(regions)
        cursor = clamp_cursor(text, cursor)
        start = index.search_start(text, cursor, self.config.line_separator)

        if self.explicit_trigger_char(text, cursor, index) is not None:
            i = cursor - 1
            while i >= start:
                if self.is_explicit_char(text[i]) and (i == 0 or self.is_word_break_char(text[i - 1])):
                    return i
                i -= 1
            logger.warning(f"Explicit token reported at {cursor} but no trigger found after {start}")
            return NO_TOKEN

        i = cursor
        # Go back to the start of the word the cursor is in
        while i > start and not self.is_word_break_char(text[i - 1]):
            i -= 1

        for _ in range(self.config.max_keywords - 1):
            # Step over exactly one word-break character
            if i > start and self.is_word_break_char(text[i - 1]):
                i -= 1
            # Words separated by more than one break are never one query
            if i > start and self.is_word_break_char(text[i - 1]):
                break
            while i > start and not self.is_word_break_char(text[i - 1]):
                i -= 1

        # The token must not start on a separator or trigger
        while i < cursor and (self.is_word_break_char(text[i]) or self.is_explicit_char(text[i])):
            i += 1

        logger.trace(f"Implicit token start for cursor={cursor}: {i} (search start {start})")
        return i

    def find_token_end(self, text: str, cursor: int, regions: Regions = None) -> int:
        """Return the index after the last character of the token at ``cursor``."""
        index = self._index(regions)
        cursor = clamp_cursor(text, cursor)
        end = index.search_end(text, cursor, self.config.line_separator)

        i = cursor
        while i < end:
            if self.is_word_break_char(text[i]):
                return i
            i += 1
        return i

    def is_valid_mention(self, text: str, start: int, end: int) -> bool:
        """Return True if ``text[start:end]`` is a valid explicit or implicit token."""
        if start < 0 or end > len(text) or start >= end:
            return False

        token = text[start:end]
        threshold = self.config.minimum_implicit_length
        multiple_words = self.contains_word_break_char(token)
        has_explicit = self.contains_explicit_char(token)

        if not multiple_words and has_explicit:
            # One word with a trigger: the trigger must come first, e.g. "@d"
            if not self.is_explicit_char(token[0]):
                return False
            if not self.has_word_break_before_explicit_char(text, end):
                return False
            if len(token) == 1:
                return True
            return is_letter_or_digit(token[1])

        if not multiple_words:
            # One word, no trigger, e.g. "u41"
            return len(token) >= threshold and self.only_letters_or_digits(token, threshold, 0)

        if has_explicit:
            # Explicit queries are not subject to the length threshold
            return (
                self.has_word_break_before_explicit_char(text, end)
                and self.is_explicit_char(token[0])
                and len(token) > 1
                and is_letter_or_digit(token[1])
            )

        if len(token) < threshold:
            return False
        # Either the first or the last characters must be letters or digits
        return self.only_letters_or_digits(token, threshold, 0) or self.only_letters_or_digits(
            token, threshold, len(token) - threshold
        )

    def terminate_token(self, text: str) -> str:
        # Word tokens need no terminator
        return text

    def is_explicit_char(self, c: str) -> bool:
        return c in self.config.explicit_trigger_chars

    def is_word_break_char(self, c: str) -> bool:
        return c in self.config.word_break_chars

    # ------------------------------------------------------------------
    # Explicit detection
    # ------------------------------------------------------------------

    def is_explicit(self, text: str, cursor: int, regions: Regions = None) -> bool:
        """Return True if a properly placed trigger precedes the cursor within the keywords."""
        return self.explicit_trigger_char(text, cursor, regions) is not None

    def explicit_trigger_char(self, text: str, cursor: int, regions: Regions = None) -> str | None:
        """Return the trigger character of the current keywords, or None if implicit.

        Scans back from the cursor. Seeing ``max_keywords`` word breaks before
        a trigger means the query is implicit. The first trigger found decides:
        it counts only at the start of the text or right after a word break.
        """
        if cursor < 0 or cursor > len(text):
            return None

        start = self._index(regions).search_start(text, cursor, self.config.line_separator)
        word_breaks_seen = 0
        i = cursor - 1
        while i >= start:
            c = text[i]
            if self.is_explicit_char(c):
                if i == 0 or self.is_word_break_char(text[i - 1]):
                    return c
                return None
            if self.is_word_break_char(c):
                word_breaks_seen += 1
                if word_breaks_seen == self.config.max_keywords:
                    return None
            i -= 1
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def contains_explicit_char(self, value: str) -> bool:
        return any(self.is_explicit_char(c) for c in value)

    def contains_word_break_char(self, value: str) -> bool:
        return any(self.is_word_break_char(c) for c in value)

    def only_letters_or_digits(self, value: str, count: int, start: int) -> bool:
        """Return True if the ``count`` characters from ``start`` are all letters or digits.

        Ranges reaching outside ``value`` are never valid.
        """
        if start < 0 or start + count > len(value):
            return False
        return all(is_letter_or_digit(c) for c in value[start : start + count])

    def has_word_break_before_explicit_char(self, text: str, cursor: int) -> bool:
        """Check the trigger closest before ``cursor`` is preceded by a word break.

        Looks at the full text rather than the token alone, since a token such
        as ``"@John Doe"`` only knows what precedes it through the text
        (``"Hello @John Doe"``).
        """
        i = min(cursor, len(text)) - 1
        while i >= 0:
            if self.is_explicit_char(text[i]):
                return i == 0 or self.is_word_break_char(text[i - 1])
            i -= 1
        return False
