"""Tokenizer configuration.

``TokenizerConfig`` is immutable and shared by reference between every
tokenizer call, so it is safe to read from several threads.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mentionkit.logger import get_logger

logger = get_logger("tokenizer.config")

DEFAULT_EXPLICIT_CHARS = frozenset({"@"})
DEFAULT_WORD_BREAK_CHARS = frozenset({" ", ".", "\n"})


class TokenizerConfig(BaseModel):
    """Parsing options for :class:`~mentionkit.tokenization.WordTokenizer`."""

    model_config = ConfigDict(frozen=True)

    line_separator: str = Field(default="\n", min_length=1, description="Separator delimiting lines")
    minimum_implicit_length: int = Field(
        default=4,
        ge=1,
        description="Letters/digits required before an un-triggered word is suggestable",
    )
    max_keywords: int = Field(
        default=1,
        ge=1,
        description="Words that may follow an explicit trigger and still count as one query",
    )
    explicit_trigger_chars: frozenset[str] = Field(
        default=DEFAULT_EXPLICIT_CHARS, description="Characters introducing an explicit mention"
    )
    word_break_chars: frozenset[str] = Field(
        default=DEFAULT_WORD_BREAK_CHARS, description="Characters separating words"
    )

    @field_validator("explicit_trigger_chars", "word_break_chars", mode="before")
    @classmethod
    def _split_strings(cls, value: Any) -> Any:
        # "@#" is shorthand for {"@", "#"}
        if isinstance(value, str):
            return frozenset(value)
        return value

    @field_validator("explicit_trigger_chars", "word_break_chars")
    @classmethod
    def _single_characters(cls, value: frozenset[str]) -> frozenset[str]:
        if not value:
            raise ValueError("character set must not be empty")
        invalid = sorted(c for c in value if len(c) != 1)
        if invalid:
            raise ValueError(f"expected single characters, got {invalid!r}")
        return value

    @model_validator(mode="after")
    def _disjoint_character_sets(self) -> "TokenizerConfig":
        shared = self.explicit_trigger_chars & self.word_break_chars
        if shared:
            raise ValueError(f"characters cannot be both triggers and word breaks: {sorted(shared)!r}")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TokenizerConfig":
        """Build a configuration from plain data (e.g. a parsed settings file)."""
        config = cls.model_validate(dict(data))
        logger.debug(
            f"Loaded tokenizer config (threshold={config.minimum_implicit_length}, "
            f"max_keywords={config.max_keywords})"
        )
        return config


DEFAULT_CONFIG = TokenizerConfig()
