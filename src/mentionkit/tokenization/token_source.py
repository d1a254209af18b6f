"""
Token source turning editor state into query tokens.
"""

from __future__ import annotations

from dataclasses import dataclass

from mentionkit.domain.protocols.tokenizer import Tokenizer
from mentionkit.domain.types.tokens import QueryToken
from mentionkit.logger import get_logger

from .regions import SpanIndex
from .word_tokenizer import NO_TOKEN, Regions, WordTokenizer

logger = get_logger("tokenizer.source")


@dataclass(frozen=True, slots=True)
class TokenWindow:
    """Bounds of the candidate token around the cursor."""

    start: int
    end: int
    text: str

    @property
    def token_string(self) -> str:
        return self.text[self.start : self.end]


def find_token_window(tokenizer: Tokenizer, text: str, cursor: int, regions: Regions = None) -> TokenWindow | None:
    """Return the token window at ``cursor``, or None when the tokenizer found no start."""
    if regions is not None:
        regions = SpanIndex.coerce(regions)
    start = tokenizer.find_token_start(text, cursor, regions)
    if start == NO_TOKEN:
        return None
    end = tokenizer.find_token_end(text, cursor, regions)
    return TokenWindow(start=start, end=end, text=text)


def query_token_for(
    tokenizer: Tokenizer, text: str, cursor: int, regions: Regions = None
) -> QueryToken | None:
    """Return the valid :class:`QueryToken` at ``cursor``, or None when no token is active."""
    if regions is not None:
        regions = SpanIndex.coerce(regions)
    return token_from_window(tokenizer, find_token_window(tokenizer, text, cursor, regions), regions)


def token_from_window(
    tokenizer: Tokenizer, window: TokenWindow | None, regions: Regions = None
) -> QueryToken | None:
    """Validate ``window`` and convert it into a :class:`QueryToken`."""
    if window is None or not tokenizer.is_valid_mention(window.text, window.start, window.end):
        return None

    token_string = window.token_string
    explicit_char = tokenizer.explicit_trigger_char(window.text, window.end, regions)
    if explicit_char is not None and not token_string.startswith(explicit_char):
        logger.debug(f"Trigger {explicit_char!r} lies outside token {token_string!r}; treating as implicit")
        explicit_char = None
    return QueryToken(token_string=token_string, explicit_char=explicit_char)


class TextTokenSource:
    """Stateful token source fed with every text or cursor change.

    Example:
        ```python
        source = TextTokenSource(WordTokenizer())
        source.update("Hello @Jo", 9)
        source.query_token_if_valid()  # QueryToken("@Jo", "@")
        ```
    """

    def __init__(self, tokenizer: Tokenizer | None = None) -> None:
        self.tokenizer: Tokenizer = tokenizer or WordTokenizer()
        self._text = ""
        self._cursor = 0
        self._regions: SpanIndex | None = None
        self._window: TokenWindow | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def regions(self) -> SpanIndex:
        return SpanIndex.coerce(self._regions)

    def update(self, text: str, cursor: int, regions: Regions = None) -> QueryToken | None:
        """Record the new editor state and return the active token, if any.

        When ``regions`` is None the tokenizer's own regions apply.
        """
        self._text = text
        self._cursor = cursor
        self._regions = None if regions is None else SpanIndex.coerce(regions)
        self._window = find_token_window(self.tokenizer, text, cursor, self._regions)
        return self.query_token_if_valid()

    def token_bounds(self) -> tuple[int, int] | None:
        """Return ``(start, end)`` of the candidate token, or None."""
        if self._window is None:
            return None
        return self._window.start, self._window.end

    def current_token_string(self) -> str:
        if self._window is None:
            return ""
        return self._window.token_string

    def query_token_if_valid(self) -> QueryToken | None:
        return token_from_window(self.tokenizer, self._window, self._regions)
