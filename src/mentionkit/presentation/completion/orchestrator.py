"""
Orchestrator that coordinates completion strategies.
"""

from __future__ import annotations

from collections.abc import Sequence

from textual_autocomplete import DropdownItem, TargetState

from mentionkit.logger import get_logger
from mentionkit.tokenization import SpanIndex
from mentionkit.tokenization.word_tokenizer import Regions

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("autocomplete.orchestrator")


class CompletionOrchestrator:
    """Selects the first strategy able to serve the current request."""

    def __init__(self, strategies: Sequence[CompletionStrategy]) -> None:
        self._strategies = list(strategies)

    def get_completions(self, state: TargetState, regions: Regions = None) -> list[DropdownItem]:
        request = CompletionRequest(state, SpanIndex.coerce(regions))
        for strategy in self._strategies:
            try:
                if strategy.can_handle(request):
                    logger.debug(f"Strategy {strategy.__class__.__name__} selected for completion")
                    return strategy.get_candidates(request)
            except Exception as e:
                logger.opt(exception=e).error(f"Completion strategy {strategy.__class__.__name__} failed")
        logger.debug("No completion strategy matched current input")
        return []
