"""Tokenizer-facing protocols."""

from typing import Awaitable, Iterable, Protocol, Sequence, runtime_checkable

from mentionkit.domain.types.tokens import CommittedMentionRegion, QueryToken

__all__ = ["Tokenizer", "TokenSource", "QueryTokenReceiver"]


@runtime_checkable
class Tokenizer(Protocol):
    """Finds and validates mention tokens around a cursor.

    ``regions`` are the committed mention regions of ``text``; a tokenizer
    never extends a token into or across one of them.
    """

    def find_token_start(
        self, text: str, cursor: int, regions: Iterable[CommittedMentionRegion] | None = None
    ) -> int:
        """Return the index of the first character of the token at ``cursor``."""
        ...

    def find_token_end(
        self, text: str, cursor: int, regions: Iterable[CommittedMentionRegion] | None = None
    ) -> int:
        """Return the index after the last character of the token at ``cursor``."""
        ...

    def is_valid_mention(self, text: str, start: int, end: int) -> bool:
        """Return ``True`` if ``text[start:end]`` is a valid explicit or implicit token."""
        ...

    def terminate_token(self, text: str) -> str:
        """Return ``text`` with a token terminator appended where required."""
        ...

    def is_explicit_char(self, c: str) -> bool: ...

    def is_word_break_char(self, c: str) -> bool: ...

    def explicit_trigger_char(
        self, text: str, cursor: int, regions: Iterable[CommittedMentionRegion] | None = None
    ) -> str | None: ...


@runtime_checkable
class TokenSource(Protocol):
    """Produces the query token for the current editor state."""

    def current_token_string(self) -> str:
        """Return the text currently considered for suggestions (may be invalid)."""
        ...

    def query_token_if_valid(self) -> QueryToken | None:
        """Return the current :class:`QueryToken`, or ``None`` when no token is active."""
        ...


class QueryTokenReceiver(Protocol):
    """Receives query tokens and answers later per bucket.

    Results are delivered through a
    :class:`~mentionkit.domain.protocols.suggestions.SuggestionsResultListener`.
    The return value names the buckets the receiver will answer for; it may be
    returned directly or awaited.
    """

    def on_query_received(self, query_token: QueryToken) -> Sequence[str] | Awaitable[Sequence[str]]: ...
