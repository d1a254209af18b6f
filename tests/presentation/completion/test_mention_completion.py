from textual_autocomplete import DropdownItem, TargetState

from mentionkit.application import MentionsController
from mentionkit.domain.mentions import SimpleMention
from mentionkit.domain.types import CommittedMentionRegion, QueryToken, SuggestionsResult
from mentionkit.presentation.completion import CompletionRequest, MentionCompletionStrategy
from mentionkit.tokenization import SpanIndex


class StubReceiver:
    def __init__(self):
        self.queries = []

    def on_query_received(self, query_token):
        self.queries.append(query_token)
        return ["people"]


def make_state(text: str, cursor: int | None = None) -> TargetState:
    if cursor is None:
        cursor = len(text)
    return TargetState(text=text, cursor_position=cursor)


def test_mention_strategy_detects_explicit_token() -> None:
    controller = MentionsController(StubReceiver())
    strategy = MentionCompletionStrategy(controller)
    request = CompletionRequest(make_state("See @Jo"))

    assert strategy.can_handle(request)
    assert controller.receiver.queries == [QueryToken("@Jo")]

    controller.on_receive_suggestions_result(
        SuggestionsResult(QueryToken("@Jo", "@"), [SimpleMention(1, "John Doe"), SimpleMention(2, "Joan")]),
        "people",
    )
    candidates = strategy.get_candidates(request)

    assert [item.main for item in candidates] == ["John Doe", "Joan"]
    assert all(isinstance(item, DropdownItem) for item in candidates)


def test_mention_strategy_ignores_short_words() -> None:
    controller = MentionsController(StubReceiver())
    strategy = MentionCompletionStrategy(controller)

    assert not strategy.can_handle(CompletionRequest(make_state("See Jo")))
    assert strategy.get_candidates(CompletionRequest(make_state("See Jo"))) == []


def test_mention_strategy_respects_regions() -> None:
    controller = MentionsController(StubReceiver())
    strategy = MentionCompletionStrategy(controller)
    regions = SpanIndex([CommittedMentionRegion(0, 5)])

    assert not strategy.can_handle(CompletionRequest(make_state("@John"), regions))
