"""Exception hierarchy for mentionkit.

Tokenizer scans never raise for bad input; they degrade to "no active
mention". These errors are raised only where the host hands in data that
breaks a structural invariant (committed mention regions).
"""

__all__ = [
    "MentionKitError",
    "InvalidRegionError",
    "OverlappingRegionsError",
]


class MentionKitError(Exception):
    """Base class for all mentionkit errors."""


class InvalidRegionError(MentionKitError, ValueError):
    """Raised when a committed mention region has invalid bounds."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"Invalid mention region [{start}, {end}): expected 0 <= start < end")


class OverlappingRegionsError(MentionKitError, ValueError):
    """Raised when committed mention regions overlap each other."""

    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"Committed mention regions overlap: [{first.start}, {first.end}) and [{second.start}, {second.end})"
        )
