"""Unit tests for QueryToken and SuggestionsResult."""

from dataclasses import FrozenInstanceError

import pytest

from mentionkit.domain.mentions import SimpleMention
from mentionkit.domain.types import QueryToken, SuggestionsResult


class TestQueryToken:
    """Tests for QueryToken."""

    def test_explicit_keywords_strip_trigger(self):
        token = QueryToken("@John", "@")
        assert token.is_explicit()
        assert token.keywords() == "John"

    def test_implicit_keywords_unchanged(self):
        token = QueryToken("John")
        assert not token.is_explicit()
        assert token.keywords() == "John"

    def test_lone_trigger_has_empty_keywords(self):
        assert QueryToken("@", "@").keywords() == ""

    def test_equality_ignores_explicit_char(self):
        assert QueryToken("@John", "@") == QueryToken("@John")
        assert hash(QueryToken("@John", "@")) == hash(QueryToken("@John"))
        assert QueryToken("@John") != QueryToken("@Jon")

    def test_not_equal_to_other_types(self):
        assert QueryToken("john") != "john"

    def test_is_immutable(self):
        token = QueryToken("john")
        with pytest.raises(FrozenInstanceError):
            token.token_string = "jane"  # type: ignore[misc]


def test_suggestions_result_stores_tuple() -> None:
    mention = SimpleMention(1, "John Doe")
    result = SuggestionsResult(QueryToken("@Jo", "@"), [mention])
    assert result.suggestions == (mention,)
    assert len(result) == 1
