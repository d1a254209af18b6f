"""Domain model for committed mentions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from mentionkit.domain.types.tokens import CommittedMentionRegion

if TYPE_CHECKING:
    from mentionkit.domain.protocols.suggestible import Mentionable

__all__ = [
    "MentionDisplayMode",
    "MentionDeleteStyle",
    "MentionSpan",
    "SimpleMention",
]


class MentionDisplayMode(str, Enum):
    """How much of a mention's text is shown in the editor."""

    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


class MentionDeleteStyle(str, Enum):
    """What happens to a mention span when the user deletes into it."""

    FULL_DELETE = "full_delete"
    """Remove the whole span."""
    PARTIAL_NAME_DELETE = "partial_name_delete"
    """First shrink to the partial text, delete the rest on the next delete."""


@dataclass(frozen=True)
class MentionSpan:
    """A :class:`Mentionable` bound to the region of text it occupies."""

    mention: Mentionable
    region: CommittedMentionRegion
    display_mode: MentionDisplayMode = MentionDisplayMode.FULL
    selected: bool = False

    def display_string(self) -> str:
        return self.mention.text_for_display_mode(self.display_mode)

    def with_display_mode(self, mode: MentionDisplayMode) -> MentionSpan:
        return replace(self, display_mode=mode)

    def with_region(self, region: CommittedMentionRegion) -> MentionSpan:
        return replace(self, region=region)


@dataclass(frozen=True)
class SimpleMention:
    """Plain :class:`Mentionable` backed by fixed strings.

    ``partial_text`` is shown in ``PARTIAL`` mode (e.g. a first name); it
    falls back to the first word of ``primary_text``.
    """

    suggestible_id: int
    primary_text: str
    partial_text: str | None = None
    delete_style: MentionDeleteStyle = MentionDeleteStyle.FULL_DELETE

    def text_for_display_mode(self, mode: MentionDisplayMode) -> str:
        if mode == MentionDisplayMode.FULL:
            return self.primary_text
        if mode == MentionDisplayMode.PARTIAL:
            if self.partial_text is not None:
                return self.partial_text
            return self.primary_text.split(" ", 1)[0]
        return ""
