"""
Utilities for applying a selected mention to the input field.
"""

from __future__ import annotations

from dataclasses import dataclass

from textual_autocomplete import TargetState

from mentionkit.application import MentionsController
from mentionkit.domain.mentions import MentionSpan, SimpleMention
from mentionkit.domain.protocols import Mentionable, Suggestible
from mentionkit.logger import get_logger
from mentionkit.tokenization import SpanIndex
from mentionkit.tokenization.word_tokenizer import Regions

logger = get_logger("autocomplete.applier")


@dataclass(slots=True)
class ApplyResult:
    """Result of applying a completion value."""

    text: str
    cursor: int
    regions: SpanIndex
    span: MentionSpan | None = None


class MentionApplier:
    """Replaces the active token with the selected suggestion."""

    def __init__(self, controller: MentionsController) -> None:
        self._controller = controller

    def find_suggestion(self, value: str) -> Suggestible | None:
        """Return the current suggestion whose primary text is ``value``."""
        for suggestion in self._controller.aggregator.suggestions:
            if suggestion.primary_text == value:
                return suggestion
        return None

    def apply(self, value: str, state: TargetState, regions: Regions = None) -> ApplyResult:
        logger.info(f"apply: value={value!r} text={state.text!r} cursor={state.cursor_position}")
        index = SpanIndex.coerce(regions)

        suggestion = self.find_suggestion(value)
        if isinstance(suggestion, Mentionable):
            mention = suggestion
        else:
            mention = SimpleMention(
                suggestible_id=suggestion.suggestible_id if suggestion is not None else hash(value),
                primary_text=value,
            )

        self._controller.on_text_changed(state.text, state.cursor_position, index)
        edit = self._controller.select(mention)
        if edit is None:
            logger.warning(f"No active mention token; {value!r} inserted at cursor")
            text = state.text[: state.cursor_position] + value + state.text[state.cursor_position :]
            cursor = state.cursor_position + len(value)
            return ApplyResult(text=text, cursor=cursor, regions=index)

        return ApplyResult(text=edit.text, cursor=edit.cursor, regions=edit.regions, span=edit.span)
