"""Domain protocols - interfaces for all implementations.

This module defines protocols (structural types) that describe the contracts
between the tokenizer core and the editor that hosts it. Using protocols
allows hosts to plug in their own models, receivers and views without
inheriting from library classes.
"""

from mentionkit.domain.protocols.suggestible import Mentionable, Suggestible
from mentionkit.domain.protocols.suggestions import (
    SuggestionsListBuilder,
    SuggestionsResultListener,
    SuggestionsVisibilityManager,
)
from mentionkit.domain.protocols.tokenizer import QueryTokenReceiver, Tokenizer, TokenSource

__all__ = [
    "Mentionable",
    "Suggestible",
    "SuggestionsListBuilder",
    "SuggestionsResultListener",
    "SuggestionsVisibilityManager",
    "QueryTokenReceiver",
    "Tokenizer",
    "TokenSource",
]
