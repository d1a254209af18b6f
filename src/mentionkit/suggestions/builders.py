"""
Default strategy for ordering aggregated suggestions.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from mentionkit.domain.protocols.suggestible import Suggestible
from mentionkit.domain.types.suggestions import SuggestionsResult


class BucketOrderListBuilder:
    """Concatenates bucket results in a fixed bucket order.

    Buckets listed in ``bucket_order`` come first, in that order; any other
    bucket follows alphabetically. Within a bucket the receiver's order is
    kept. Suggestions sharing a ``suggestible_id`` appear once, where first
    seen.
    """

    def __init__(self, bucket_order: Sequence[str] | None = None, deduplicate: bool = True) -> None:
        self._bucket_order = list(bucket_order or [])
        self._deduplicate = deduplicate

    def _ordered_buckets(self, buckets: Sequence[str]) -> list[str]:
        known = [bucket for bucket in self._bucket_order if bucket in buckets]
        rest = sorted(bucket for bucket in buckets if bucket not in self._bucket_order)
        return known + rest

    def build_suggestions(
        self,
        latest_results: Mapping[str, SuggestionsResult],
        current_token_string: str,
    ) -> list[Suggestible]:
        suggestions: list[Suggestible] = []
        seen: set[int] = set()
        for bucket in self._ordered_buckets(list(latest_results)):
            for suggestion in latest_results[bucket].suggestions:
                if self._deduplicate:
                    if suggestion.suggestible_id in seen:
                        continue
                    seen.add(suggestion.suggestible_id)
                suggestions.append(suggestion)
        return suggestions
