"""
Mention autocomplete overlay for a textual ``Input``.
"""

from __future__ import annotations

from textual.widgets import Input
from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from mentionkit.application import MentionsController, follow_edit
from mentionkit.domain.mentions import MentionSpan
from mentionkit.domain.protocols import Suggestible
from mentionkit.logger import get_logger
from mentionkit.presentation.completion import (
    CompletionOrchestrator,
    MentionApplier,
    MentionCompletionStrategy,
)
from mentionkit.tokenization import SpanIndex

logger = get_logger("mention_input")


class MentionAutoComplete(AutoComplete):
    """Overlay offering mention suggestions for an ``Input``.

    The overlay owns the committed mention spans of its target. Spans move
    with edits made around them; spans whose text was edited are dropped
    before every tokenization.
    """

    def __init__(self, input_widget: Input, controller: MentionsController, **kwargs) -> None:
        self.input_widget = input_widget
        self.controller = controller
        self.spans: list[MentionSpan] = []
        self._last_text = input_widget.value
        self._orchestrator = CompletionOrchestrator([MentionCompletionStrategy(controller)])
        self._applier = MentionApplier(controller)
        controller.aggregator.subscribe(self._on_suggestions_changed)

        super().__init__(
            target=input_widget,
            candidates=self._collect_candidates,
            prevent_default_enter=True,
            **kwargs,
        )

    @property
    def regions(self) -> SpanIndex:
        return SpanIndex(span.region for span in self.spans)

    def _follow_edits(self, text: str, cursor: int) -> None:
        if text != self._last_text:
            moved = []
            for span in self.spans:
                region = follow_edit(span.region, self._last_text, text, cursor)
                if region is not None:
                    moved.append(span.with_region(region))
            self.spans = moved
            self._last_text = text
        self._prune_spans(text)

    def _prune_spans(self, text: str) -> None:
        kept = [span for span in self.spans if text[span.region.start : span.region.end] == span.display_string()]
        if len(kept) != len(self.spans):
            logger.debug(f"Dropped {len(self.spans) - len(kept)} mention span(s) invalidated by edits")
        self.spans = kept

    def _collect_candidates(self, state: TargetState) -> list[DropdownItem]:
        self._follow_edits(state.text, state.cursor_position)
        candidates = self._orchestrator.get_completions(state, self.regions)
        logger.debug(f"Collected {len(candidates)} completion candidates")
        return candidates

    def get_matches(
        self,
        target_state: TargetState,
        candidates: list[DropdownItem],
        search_string: str,
    ) -> list[DropdownItem]:
        # Receivers already matched the keywords
        return candidates

    def get_search_string(self, target_state: TargetState) -> str:
        token = self.controller.current_token
        return token.keywords() if token is not None else ""

    def should_show_dropdown(self, _search_string: str) -> bool:
        return self.controller.current_token is not None and bool(self.controller.aggregator.suggestions)

    def apply_completion(self, value: str, state: TargetState) -> None:
        result = self._applier.apply(value, state, self.regions)
        if result.span is not None:
            # Shifting keeps region order, so old spans rebind to the remaining regions in turn
            previous = sorted(self.spans, key=lambda span: span.region)
            remaining = [region for region in result.regions if region != result.span.region]
            rebound = [span.with_region(region) for span, region in zip(previous, remaining)]
            self.spans = sorted(rebound + [result.span], key=lambda span: span.region)
            self._last_text = result.text
        else:
            self._follow_edits(result.text, result.cursor)
        self.target.value = result.text
        self.target.cursor_position = result.cursor
        logger.info(f"Applied completion; new cursor={result.cursor}")

    def _on_suggestions_changed(self, suggestions: tuple[Suggestible, ...]) -> None:
        if self.is_mounted:
            self.call_after_refresh(self._align_and_rebuild)

    def _align_and_rebuild(self) -> None:
        self._align_to_target()
        self._target_state = self._get_target_state()
        search_string = self.get_search_string(self._target_state)
        self._rebuild_options(self._target_state, search_string)
