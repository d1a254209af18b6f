"""
Completion strategy utilities for the mention autocomplete overlay.

This package provides a strategy-based decomposition of the completion
flow used by `MentionAutoComplete`.
"""

from .strategy import CompletionRequest, CompletionStrategy
from .orchestrator import CompletionOrchestrator
from .mention_completion import MentionCompletionStrategy
from .applier import ApplyResult, MentionApplier

__all__ = [
    "CompletionRequest",
    "CompletionStrategy",
    "CompletionOrchestrator",
    "MentionCompletionStrategy",
    "ApplyResult",
    "MentionApplier",
]
