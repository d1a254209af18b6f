"""
Rich rendering of text containing committed mentions.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field
from rich.style import Style
from rich.text import Text

from mentionkit.domain.mentions import MentionSpan
from mentionkit.domain.types.tokens import CommittedMentionRegion
from mentionkit.logger import get_logger

logger = get_logger("rendering")


class MentionSpanConfig(BaseModel):
    """Colours used to draw mention spans."""

    model_config = ConfigDict(frozen=True)

    normal_text_color: str = Field(default="#00a0dc", description="Text colour of a mention")
    normal_background_color: str | None = Field(default=None, description="Background of a mention")
    selected_text_color: str = Field(default="white", description="Text colour of a selected mention")
    selected_background_color: str | None = Field(
        default="#0077b5", description="Background of a selected mention"
    )

    def style(self, selected: bool = False) -> Style:
        if selected:
            return Style(color=self.selected_text_color, bgcolor=self.selected_background_color)
        return Style(color=self.normal_text_color, bgcolor=self.normal_background_color)


class MentionRenderer:
    """Builds a :class:`rich.text.Text` with mention spans highlighted."""

    def __init__(self, config: MentionSpanConfig | None = None) -> None:
        self.config = config or MentionSpanConfig()

    def render(self, text: str, spans: Iterable[MentionSpan | CommittedMentionRegion]) -> Text:
        rendered = Text(text)
        for span in spans:
            if isinstance(span, MentionSpan):
                region, selected = span.region, span.selected
            else:
                region, selected = span, False
            if region.end > len(text):
                logger.warning(f"Mention region [{region.start}, {region.end}) exceeds text length {len(text)}")
                continue
            rendered.stylize(self.config.style(selected), region.start, region.end)
        return rendered
