"""Domain events and the event bus."""

from mentionkit.domain.events.bus import EventBus, EventHandler
from mentionkit.domain.events.types import (
    Event,
    QueryDispatched,
    QueryTokenChanged,
    SuggestionsUpdated,
    SuggestionsVisibilityChanged,
)

__all__ = [
    "EventBus",
    "EventHandler",
    "Event",
    "QueryDispatched",
    "QueryTokenChanged",
    "SuggestionsUpdated",
    "SuggestionsVisibilityChanged",
]
