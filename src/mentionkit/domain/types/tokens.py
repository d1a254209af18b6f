"""Token-related domain types."""

from __future__ import annotations

from dataclasses import dataclass

from mentionkit.errors import InvalidRegionError

__all__ = [
    "QueryToken",
    "CommittedMentionRegion",
]


@dataclass(frozen=True, eq=False)
class QueryToken:
    """A token found by a tokenizer that can be used to query for suggestions.

    If the query is explicit, the explicit character is still part of
    ``token_string``. Use :meth:`keywords` for the text without it.

    Equality and hashing only consider ``token_string``: two tokens typed the
    same way are the same query, whatever their trigger bookkeeping says.
    """

    token_string: str
    """What the user typed, exactly, as detected by the tokenizer."""
    explicit_char: str | None = None
    """Trigger character of an explicit query, ``None`` for implicit ones."""

    def is_explicit(self) -> bool:
        return self.explicit_char is not None

    def keywords(self) -> str:
        """Return the words a receiver should query with (trigger stripped)."""
        if self.is_explicit():
            return self.token_string[1:]
        return self.token_string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryToken):
            return NotImplemented
        return self.token_string == other.token_string

    def __hash__(self) -> int:
        return hash(self.token_string)


@dataclass(frozen=True, order=True)
class CommittedMentionRegion:
    """Half-open ``[start, end)`` range of text bound to a resolved mention."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise InvalidRegionError(self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def overlaps(self, other: CommittedMentionRegion) -> bool:
        return self.start < other.end and other.start < self.end

    def shifted(self, delta: int) -> CommittedMentionRegion:
        """Return a copy moved by ``delta`` characters."""
        return CommittedMentionRegion(self.start + delta, self.end + delta)
