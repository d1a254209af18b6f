"""Tests for the tokenizer-facing protocols."""

from mentionkit.application import MentionsController
from mentionkit.domain.protocols import Tokenizer, TokenSource
from mentionkit.domain.types import QueryToken
from mentionkit.tokenization import TextTokenSource, WordTokenizer


class FixedTokenizer:
    """Treats the whole text as one token."""

    def find_token_start(self, text, cursor, regions=None):
        return 0

    def find_token_end(self, text, cursor, regions=None):
        return len(text)

    def is_valid_mention(self, text, start, end):
        return end > start

    def terminate_token(self, text):
        return text

    def is_explicit_char(self, c):
        return False

    def is_word_break_char(self, c):
        return False

    def explicit_trigger_char(self, text, cursor, regions=None):
        return None


class StubReceiver:
    def __init__(self):
        self.queries = []

    def on_query_received(self, query_token):
        self.queries.append(query_token)
        return ["people"]


def test_builtin_classes_satisfy_protocols():
    assert isinstance(WordTokenizer(), Tokenizer)
    assert isinstance(TextTokenSource(), TokenSource)


def test_controller_accepts_any_tokenizer():
    tokenizer = FixedTokenizer()
    assert isinstance(tokenizer, Tokenizer)

    receiver = StubReceiver()
    controller = MentionsController(receiver, tokenizer=tokenizer)

    assert controller.tokenizer is tokenizer
    assert controller.on_text_changed("any words", 3) == QueryToken("any words")
    assert receiver.queries == [QueryToken("any words")]
