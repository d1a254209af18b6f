from textual_autocomplete import TargetState

from mentionkit.application import MentionsController
from mentionkit.domain.mentions import SimpleMention
from mentionkit.domain.types import CommittedMentionRegion, QueryToken, SuggestionsResult
from mentionkit.presentation.completion import MentionApplier


class StubReceiver:
    def on_query_received(self, query_token):
        return ["people"]


class PlainSuggestion:
    """Suggestible that is not Mentionable."""

    def __init__(self, suggestible_id: int, primary_text: str):
        self.suggestible_id = suggestible_id
        self.primary_text = primary_text


def make_state(text: str, cursor: int | None = None) -> TargetState:
    if cursor is None:
        cursor = len(text)
    return TargetState(text=text, cursor_position=cursor)


def controller_with(*suggestions) -> MentionsController:
    controller = MentionsController(StubReceiver())
    controller.on_text_changed("Hello @Jo", 9)
    controller.on_receive_suggestions_result(SuggestionsResult(QueryToken("@Jo", "@"), suggestions), "people")
    return controller


def test_apply_mention_replaces_token() -> None:
    john = SimpleMention(1, "John Doe")
    applier = MentionApplier(controller_with(john))

    result = applier.apply("John Doe", make_state("Hello @Jo"))

    assert result.text == "Hello John Doe "
    assert result.cursor == len("Hello John Doe ")
    assert list(result.regions) == [CommittedMentionRegion(6, 14)]
    assert result.span is not None
    assert result.span.mention is john


def test_apply_plain_suggestible_wraps_it() -> None:
    applier = MentionApplier(controller_with(PlainSuggestion(7, "Joanna")))

    result = applier.apply("Joanna", make_state("Hello @Jo"))

    assert result.text == "Hello Joanna "
    assert result.span is not None
    assert result.span.mention.suggestible_id == 7


def test_apply_without_token_inserts_at_cursor() -> None:
    applier = MentionApplier(MentionsController(StubReceiver()))

    result = applier.apply("x", make_state("Hi"))

    assert result.text == "Hix"
    assert result.cursor == 3
    assert result.span is None
