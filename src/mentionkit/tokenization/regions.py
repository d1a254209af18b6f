"""Read-only index over committed mention regions.

The tokenizer consults this index only to fence its search window, so a
token never reaches into or across a mention the user already accepted.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Iterable, Iterator

from mentionkit.domain.types.tokens import CommittedMentionRegion
from mentionkit.errors import OverlappingRegionsError
from mentionkit.utils import clamp_cursor

__all__ = ["SpanIndex"]


class SpanIndex:
    """Sorted, non-overlapping committed mention regions.

    Regions may be given in any order. Overlapping regions raise
    :class:`~mentionkit.errors.OverlappingRegionsError`.
    """

    __slots__ = ("_regions", "_starts", "_ends")

    def __init__(self, regions: Iterable[CommittedMentionRegion] = ()) -> None:
        ordered = sorted(regions)
        for previous, current in zip(ordered, ordered[1:]):
            if previous.overlaps(current):
                raise OverlappingRegionsError(previous, current)
        self._regions: tuple[CommittedMentionRegion, ...] = tuple(ordered)
        # Both lists are sorted because regions do not overlap
        self._starts = [region.start for region in ordered]
        self._ends = [region.end for region in ordered]

    @classmethod
    def coerce(cls, regions: SpanIndex | Iterable[CommittedMentionRegion] | None) -> SpanIndex:
        """Return ``regions`` as a :class:`SpanIndex`, building one if needed."""
        if regions is None:
            return _EMPTY
        if isinstance(regions, SpanIndex):
            return regions
        return cls(regions)

    @classmethod
    def empty(cls) -> SpanIndex:
        return _EMPTY

    def __iter__(self) -> Iterator[CommittedMentionRegion]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __repr__(self) -> str:
        spans = ", ".join(f"[{r.start}, {r.end})" for r in self._regions)
        return f"SpanIndex({spans})"

    def region_at(self, offset: int) -> CommittedMentionRegion | None:
        """Return the region containing ``offset``, if any."""
        index = bisect_right(self._starts, offset) - 1
        if index >= 0 and self._regions[index].contains(offset):
            return self._regions[index]
        return None

    def nearest_end_before(self, cursor: int) -> int:
        """Return the largest region end ``<= cursor``, or ``0``."""
        index = bisect_right(self._ends, cursor) - 1
        return self._ends[index] if index >= 0 else 0

    def nearest_start_after(self, cursor: int, default: int) -> int:
        """Return the smallest region start ``>= cursor``, or ``default``."""
        index = bisect_left(self._starts, cursor)
        return self._starts[index] if index < len(self._starts) else default

    def search_start(self, text: str, cursor: int, line_separator: str) -> int:
        """Furthest index before ``cursor`` a token may start at.

        The later of the end of the last region before the cursor and the
        start of the cursor's line.
        """
        cursor = clamp_cursor(text, cursor)
        separator_index = text.rfind(line_separator, 0, cursor)
        line_start = 0 if separator_index == -1 else separator_index + len(line_separator)
        return max(self.nearest_end_before(cursor), line_start)

    def search_end(self, text: str, cursor: int, line_separator: str) -> int:
        """Furthest index after ``cursor`` a token may end at.

        The earlier of the start of the first region after the cursor and the
        next line separator, or the text length when there is neither.
        """
        cursor = clamp_cursor(text, cursor)
        separator_index = text.find(line_separator, cursor)
        line_end = len(text) if separator_index == -1 else separator_index
        return min(self.nearest_start_after(cursor, len(text)), line_end)


_EMPTY = SpanIndex()
