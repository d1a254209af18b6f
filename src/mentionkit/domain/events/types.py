"""Event types for the event bus system.

Events decouple the mention controller from whatever view displays
suggestions or reacts to token changes.
"""

import time
from dataclasses import dataclass, field

from mentionkit.domain.protocols.suggestible import Suggestible
from mentionkit.domain.types.tokens import QueryToken


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class QueryTokenChanged(Event):
    """Event published when the active query token changes.

    Published before the new token is dispatched to the receiver.

    Attributes:
        query_token: New active token, ``None`` when no token is active
        previous_token: Token that was active before
    """

    query_token: QueryToken | None
    """New active token."""
    previous_token: QueryToken | None = None
    """Previously active token."""


@dataclass
class QueryDispatched(Event):
    """Event published once the receiver named the buckets it will answer."""

    query_token: QueryToken
    """Token sent to the receiver."""
    buckets: tuple[str, ...] = ()
    """Buckets the receiver will answer for."""


@dataclass
class SuggestionsUpdated(Event):
    """Event published when the aggregated suggestion list is rebuilt."""

    query_token: QueryToken
    """Token the suggestions belong to."""
    suggestions: tuple[Suggestible, ...]
    """Suggestions in display order."""
    bucket: str
    """Bucket whose result triggered the rebuild."""


@dataclass
class SuggestionsVisibilityChanged(Event):
    """Event published when the suggestion list is shown or hidden."""

    visible: bool
    """Whether the suggestion list is now displayed."""
