"""Suggestible and Mentionable protocols."""

from typing import Protocol, runtime_checkable

from mentionkit.domain.mentions import MentionDeleteStyle, MentionDisplayMode

__all__ = ["Suggestible", "Mentionable"]


@runtime_checkable
class Suggestible(Protocol):
    """Protocol for models that can be offered as suggestions.

    ``suggestible_id`` must be unique per model; it is used to eliminate
    duplicate suggestions. ``primary_text`` is the only field the default
    rendering requires.
    """

    @property
    def suggestible_id(self) -> int: ...

    @property
    def primary_text(self) -> str: ...


@runtime_checkable
class Mentionable(Suggestible, Protocol):
    """A suggestible model that can be inserted into text as a mention."""

    def text_for_display_mode(self, mode: MentionDisplayMode) -> str:
        """Return the text the mention shows in the given display mode."""
        ...

    @property
    def delete_style(self) -> MentionDeleteStyle: ...
