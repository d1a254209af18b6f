"""
Mention completion strategy for ``@`` and implicit mention tokens.
"""

from __future__ import annotations

from textual_autocomplete import DropdownItem

from mentionkit.application import MentionsController
from mentionkit.logger import get_logger

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("autocomplete.mention")


class MentionCompletionStrategy(CompletionStrategy):
    """Offers the aggregated suggestions while a mention token is active.

    ``can_handle`` forwards the input state to the controller, which
    dispatches a query whenever the token changes. Candidates are whatever
    the aggregator holds for the current token; receivers do their own
    matching, so no filtering happens here.
    """

    def __init__(self, controller: MentionsController, explicit_prefix: str = "@") -> None:
        self._controller = controller
        self._explicit_prefix = explicit_prefix

    def can_handle(self, request: CompletionRequest) -> bool:
        token = self._controller.on_text_changed(request.text, request.cursor_position, request.regions)
        return token is not None

    def get_candidates(self, request: CompletionRequest) -> list[DropdownItem]:
        token = self._controller.current_token
        if token is None:
            return []

        suggestions = self._controller.aggregator.suggestions
        logger.debug(
            f"MentionCompletionStrategy returning {len(suggestions)} suggestion(s) for {token.keywords()!r}"
        )
        prefix = self._explicit_prefix if token.is_explicit() else None
        return [DropdownItem(main=suggestion.primary_text, prefix=prefix) for suggestion in suggestions]
