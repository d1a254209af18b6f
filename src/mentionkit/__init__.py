"""mentionkit - mention tokenization and suggestion aggregation for chat editors."""

from mentionkit.application import MentionEdit, MentionsController, delete_mention, insert_mention
from mentionkit.domain.mentions import MentionDeleteStyle, MentionDisplayMode, MentionSpan, SimpleMention
from mentionkit.domain.types import CommittedMentionRegion, QueryToken, SuggestionsResult
from mentionkit.errors import InvalidRegionError, MentionKitError, OverlappingRegionsError
from mentionkit.suggestions import BucketOrderListBuilder, ResultAggregator
from mentionkit.tokenization import (
    NO_TOKEN,
    SpanIndex,
    TextTokenSource,
    TokenizerConfig,
    WordTokenizer,
    query_token_for,
)

__version__ = "0.1.0"

__all__ = [
    "MentionEdit",
    "MentionsController",
    "delete_mention",
    "insert_mention",
    "MentionDeleteStyle",
    "MentionDisplayMode",
    "MentionSpan",
    "SimpleMention",
    "CommittedMentionRegion",
    "QueryToken",
    "SuggestionsResult",
    "InvalidRegionError",
    "MentionKitError",
    "OverlappingRegionsError",
    "BucketOrderListBuilder",
    "ResultAggregator",
    "NO_TOKEN",
    "SpanIndex",
    "TextTokenSource",
    "TokenizerConfig",
    "WordTokenizer",
    "query_token_for",
]
