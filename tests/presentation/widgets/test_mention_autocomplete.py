import pytest
from textual.app import App, ComposeResult
from textual.widgets import Input
from textual_autocomplete import TargetState

from mentionkit.application import MentionsController
from mentionkit.domain.mentions import SimpleMention
from mentionkit.domain.types import CommittedMentionRegion, QueryToken, SuggestionsResult
from mentionkit.presentation.widgets import MentionAutoComplete

JOHN = SimpleMention(1, "John Doe")


class StubReceiver:
    def on_query_received(self, query_token):
        return ["people"]


class _MentionApp(App):
    def __init__(self, input_widget: Input, autocomplete: MentionAutoComplete) -> None:
        super().__init__()
        self._input = input_widget
        self._autocomplete = autocomplete

    def compose(self) -> ComposeResult:
        yield self._input
        yield self._autocomplete


def make_widgets() -> tuple[Input, MentionAutoComplete, MentionsController]:
    controller = MentionsController(StubReceiver())
    input_widget = Input()
    return input_widget, MentionAutoComplete(input_widget, controller), controller


@pytest.mark.asyncio
async def test_autocomplete_applies_selected_mention():
    input_widget, autocomplete, controller = make_widgets()
    app = _MentionApp(input_widget, autocomplete)

    async with app.run_test() as pilot:
        state = TargetState(text="Hello @Jo", cursor_position=9)
        controller.on_text_changed(state.text, state.cursor_position)
        controller.on_receive_suggestions_result(SuggestionsResult(QueryToken("@Jo", "@"), [JOHN]), "people")

        assert autocomplete.get_search_string(state) == "Jo"
        assert autocomplete.should_show_dropdown("Jo")

        autocomplete.apply_completion("John Doe", state)
        await pilot.pause()

        assert input_widget.value == "Hello John Doe "
        assert [span.region for span in autocomplete.spans] == [CommittedMentionRegion(6, 14)]


async def _commit_john(autocomplete: MentionAutoComplete, controller: MentionsController, pilot) -> None:
    state = TargetState(text="Hello @Jo", cursor_position=9)
    controller.on_text_changed(state.text, state.cursor_position)
    controller.on_receive_suggestions_result(SuggestionsResult(QueryToken("@Jo", "@"), [JOHN]), "people")
    autocomplete.apply_completion("John Doe", state)
    await pilot.pause()


@pytest.mark.asyncio
async def test_autocomplete_moves_spans_with_edits_before_them():
    input_widget, autocomplete, controller = make_widgets()
    app = _MentionApp(input_widget, autocomplete)

    async with app.run_test() as pilot:
        await _commit_john(autocomplete, controller, pilot)

        autocomplete._collect_candidates(TargetState(text="Oh Hello John Doe ", cursor_position=3))

        assert [span.region for span in autocomplete.spans] == [CommittedMentionRegion(9, 17)]


@pytest.mark.asyncio
async def test_autocomplete_drops_edited_spans():
    input_widget, autocomplete, controller = make_widgets()
    app = _MentionApp(input_widget, autocomplete)

    async with app.run_test() as pilot:
        await _commit_john(autocomplete, controller, pilot)

        autocomplete._collect_candidates(TargetState(text="Hello John Do ", cursor_position=13))

        assert autocomplete.spans == []
