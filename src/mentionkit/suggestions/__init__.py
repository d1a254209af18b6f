"""Suggestion aggregation."""

from .aggregator import ResultAggregator, SuggestionsCallback
from .builders import BucketOrderListBuilder

__all__ = [
    "ResultAggregator",
    "SuggestionsCallback",
    "BucketOrderListBuilder",
]
