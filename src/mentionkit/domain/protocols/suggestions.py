"""Suggestion collaborator protocols."""

from typing import Mapping, Protocol, Sequence

from mentionkit.domain.protocols.suggestible import Suggestible
from mentionkit.domain.types.suggestions import SuggestionsResult

__all__ = [
    "SuggestionsListBuilder",
    "SuggestionsResultListener",
    "SuggestionsVisibilityManager",
]


class SuggestionsListBuilder(Protocol):
    """Orders the newest result of every bucket into one suggestion list."""

    def build_suggestions(
        self,
        latest_results: Mapping[str, SuggestionsResult],
        current_token_string: str,
    ) -> Sequence[Suggestible]:
        """Return the suggestions to display, in display order.

        Args:
            latest_results: Newest result for every bucket
            current_token_string: Keywords of the current token
        """
        ...


class SuggestionsResultListener(Protocol):
    """Callback receiving suggestion results.

    For a single query token this may be called several times, once per
    bucket (e.g. once with people and once with companies).
    """

    def on_receive_suggestions_result(self, result: SuggestionsResult, bucket: str) -> None: ...


class SuggestionsVisibilityManager(Protocol):
    """Shows or hides the suggestion list."""

    def set_suggestions_visible(self, visible: bool) -> None: ...

    def is_showing_suggestions(self) -> bool: ...
