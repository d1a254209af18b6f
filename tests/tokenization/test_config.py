"""Unit tests for TokenizerConfig."""

import pytest
from pydantic import ValidationError

from mentionkit.tokenization import TokenizerConfig


class TestTokenizerConfig:
    """Tests for TokenizerConfig validation."""

    def test_defaults(self):
        config = TokenizerConfig()
        assert config.line_separator == "\n"
        assert config.minimum_implicit_length == 4
        assert config.max_keywords == 1
        assert config.explicit_trigger_chars == frozenset({"@"})
        assert config.word_break_chars == frozenset({" ", ".", "\n"})

    def test_string_shorthand_for_character_sets(self):
        config = TokenizerConfig(explicit_trigger_chars="@#", word_break_chars=" ,")
        assert config.explicit_trigger_chars == frozenset({"@", "#"})
        assert config.word_break_chars == frozenset({" ", ","})

    @pytest.mark.parametrize("field", ["minimum_implicit_length", "max_keywords"])
    def test_counts_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            TokenizerConfig(**{field: 0})

    def test_rejects_multi_character_members(self):
        with pytest.raises(ValidationError):
            TokenizerConfig(explicit_trigger_chars=frozenset({"@@"}))

    def test_rejects_empty_trigger_set(self):
        with pytest.raises(ValidationError):
            TokenizerConfig(explicit_trigger_chars="")

    def test_rejects_shared_characters(self):
        with pytest.raises(ValidationError):
            TokenizerConfig(explicit_trigger_chars="@.", word_break_chars=" .")

    def test_is_immutable(self):
        config = TokenizerConfig()
        with pytest.raises(ValidationError):
            config.max_keywords = 3

    def test_from_mapping(self):
        config = TokenizerConfig.from_mapping({"max_keywords": 2, "explicit_trigger_chars": "#"})
        assert config.max_keywords == 2
        assert config.explicit_trigger_chars == frozenset({"#"})
