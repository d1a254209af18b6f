"""
Strategy interfaces for mention completions.

These abstractions decompose the behaviour of the autocomplete overlay into
focused, testable components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from textual_autocomplete import DropdownItem, TargetState

from mentionkit.tokenization import SpanIndex


@dataclass(slots=True)
class CompletionRequest:
    """Snapshot of the target input state used by completion strategies."""

    state: TargetState
    regions: SpanIndex = field(default_factory=SpanIndex.empty)
    """Committed mention regions of the target text."""

    @property
    def text(self) -> str:
        """Current input text for convenience."""
        return self.state.text

    @property
    def cursor_position(self) -> int:
        """Cursor position convenience accessor."""
        return self.state.cursor_position


class CompletionStrategy(Protocol):
    """Contract implemented by all completion strategies."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this strategy should produce candidates."""

        ...

    def get_candidates(self, request: CompletionRequest) -> list[DropdownItem]:
        """Return dropdown items for the current state."""

        ...
