"""Unit tests for the event bus."""

import pytest

from mentionkit.domain.events import EventBus, QueryTokenChanged, SuggestionsVisibilityChanged
from mentionkit.domain.types import QueryToken


class TestEventBus:
    """Tests for EventBus."""

    def test_publish_to_subscribers(self):
        bus = EventBus()
        received = []
        bus.subscribe(SuggestionsVisibilityChanged, received.append)

        bus.publish(SuggestionsVisibilityChanged(visible=True))

        assert [event.visible for event in received] == [True]

    def test_only_matching_type_is_delivered(self):
        bus = EventBus()
        received = []
        bus.subscribe(SuggestionsVisibilityChanged, received.append)

        bus.publish(QueryTokenChanged(query_token=QueryToken("@a", "@")))

        assert received == []

    def test_duplicate_subscription_is_ignored(self):
        bus = EventBus()
        received = []
        bus.subscribe(SuggestionsVisibilityChanged, received.append)
        bus.subscribe(SuggestionsVisibilityChanged, received.append)

        bus.publish(SuggestionsVisibilityChanged(visible=False))

        assert len(received) == 1

    def test_async_handler_rejected(self):
        bus = EventBus()

        async def handler(event):
            return None

        with pytest.raises(TypeError):
            bus.subscribe(SuggestionsVisibilityChanged, handler)

    def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(SuggestionsVisibilityChanged, broken)
        bus.subscribe(SuggestionsVisibilityChanged, received.append)

        bus.publish(SuggestionsVisibilityChanged(visible=True))

        assert len(received) == 1

    def test_unsubscribe_and_clear(self):
        bus = EventBus()
        received = []
        bus.subscribe(SuggestionsVisibilityChanged, received.append)
        assert bus.has_subscribers(SuggestionsVisibilityChanged)

        bus.unsubscribe(SuggestionsVisibilityChanged, received.append)
        assert not bus.has_subscribers(SuggestionsVisibilityChanged)

        bus.subscribe(SuggestionsVisibilityChanged, received.append)
        bus.clear()
        bus.publish(SuggestionsVisibilityChanged(visible=True))
        assert received == []
