"""Suggestion result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mentionkit.domain.types.tokens import QueryToken

if TYPE_CHECKING:
    from mentionkit.domain.protocols.suggestible import Suggestible

__all__ = ["SuggestionsResult"]


@dataclass(frozen=True)
class SuggestionsResult:
    """Suggestions produced for a single :class:`QueryToken`.

    Attributes:
        query_token: Token the suggestions were generated for
        suggestions: Suggestions in the order the receiver produced them
    """

    query_token: QueryToken
    suggestions: tuple[Suggestible, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        if not isinstance(self.suggestions, tuple):
            object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def __len__(self) -> int:
        return len(self.suggestions)
