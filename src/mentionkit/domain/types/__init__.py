"""Shared domain types."""

from mentionkit.domain.types.tokens import CommittedMentionRegion, QueryToken
from mentionkit.domain.types.suggestions import SuggestionsResult

__all__ = [
    "CommittedMentionRegion",
    "QueryToken",
    "SuggestionsResult",
]
