"""
Aggregation of per-bucket suggestion results.

A receiver may answer a single query token several times, once per bucket
(people, companies, ...), in any order. The aggregator keeps the newest
result of every bucket for the current token only and rebuilds the final
suggestion list through a pluggable :class:`SuggestionsListBuilder`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from mentionkit.domain.protocols.suggestible import Suggestible
from mentionkit.domain.protocols.suggestions import SuggestionsListBuilder
from mentionkit.domain.types.suggestions import SuggestionsResult
from mentionkit.domain.types.tokens import QueryToken
from mentionkit.logger import get_logger

from .builders import BucketOrderListBuilder

logger = get_logger("suggestions.aggregator")

SuggestionsCallback = Callable[[tuple[Suggestible, ...]], None]


class ResultAggregator:
    """Merges the newest result per bucket for the current query token.

    Results tagged with any other token than the current one are stale and
    silently dropped. Not thread-safe; hosts receiving results on other
    threads must serialize calls.
    """

    def __init__(self, list_builder: SuggestionsListBuilder | None = None) -> None:
        self._list_builder: SuggestionsListBuilder = list_builder or BucketOrderListBuilder()
        self._current_token: QueryToken | None = None
        self._results: dict[str, SuggestionsResult] = {}
        self._waiting: dict[QueryToken, set[str]] = {}
        self._suggestions: tuple[Suggestible, ...] = ()
        self._listeners: list[SuggestionsCallback] = []

    @property
    def current_token(self) -> QueryToken | None:
        return self._current_token

    @property
    def suggestions(self) -> tuple[Suggestible, ...]:
        """Suggestions for the current token, in display order."""
        return self._suggestions

    @property
    def latest_results(self) -> Mapping[str, SuggestionsResult]:
        """Read-only view of the newest result per bucket."""
        return MappingProxyType(dict(self._results))

    def subscribe(self, callback: SuggestionsCallback) -> None:
        """Register a callback receiving every rebuilt suggestion list."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: SuggestionsCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def notify_query_token_received(self, query_token: QueryToken, buckets: Iterable[str]) -> None:
        """Make ``query_token`` current and record the buckets it will be answered on.

        Switching to a different token discards the previous token's results.
        """
        if query_token != self._current_token:
            logger.debug(f"New query token {query_token.token_string!r}; resetting {len(self._results)} bucket(s)")
            self._results.clear()
            self._waiting.clear()
            self._set_suggestions(())
        self._current_token = query_token
        # Buckets that already answered this token are not awaited again
        self._waiting.setdefault(query_token, set()).update(set(buckets) - self._results.keys())

    def add_suggestions(self, result: SuggestionsResult, bucket: str) -> bool:
        """Store ``result`` as the newest for ``bucket`` and rebuild the list.

        Returns:
            True if the result was accepted, False if it was stale
        """
        if self._current_token is None or result.query_token != self._current_token:
            current = self._current_token.token_string if self._current_token else None
            logger.debug(
                f"Dropping stale result for {result.query_token.token_string!r} "
                f"(bucket={bucket!r}, current={current!r})"
            )
            return False

        self._results[bucket] = result
        waiting = self._waiting.get(self._current_token)
        if waiting is not None:
            waiting.discard(bucket)

        built = self._list_builder.build_suggestions(
            MappingProxyType(dict(self._results)),
            self._current_token.keywords(),
        )
        logger.debug(f"Rebuilt suggestions from {len(self._results)} bucket(s): {len(built)} item(s)")
        self._set_suggestions(tuple(built))
        return True

    def is_waiting_for_results(self, query_token: QueryToken | None = None) -> bool:
        """Return True while some promised bucket has not answered yet."""
        token = query_token if query_token is not None else self._current_token
        if token is None:
            return False
        return bool(self._waiting.get(token))

    def pending_buckets(self) -> frozenset[str]:
        if self._current_token is None:
            return frozenset()
        return frozenset(self._waiting.get(self._current_token, ()))

    def clear(self) -> None:
        """Forget the current token and all results."""
        self._current_token = None
        self._results.clear()
        self._waiting.clear()
        self._set_suggestions(())

    def _set_suggestions(self, suggestions: tuple[Suggestible, ...]) -> None:
        if suggestions == self._suggestions and not suggestions:
            return
        self._suggestions = suggestions
        for listener in list(self._listeners):
            try:
                listener(suggestions)
            except Exception as e:
                logger.opt(exception=e).error(f"Suggestions listener failed: {e}")
