"""
Insertion and deletion of committed mentions.

These functions are pure: they take the editor state and return the new
text, cursor and regions without mutating anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from mentionkit.domain.mentions import MentionDeleteStyle, MentionDisplayMode, MentionSpan
from mentionkit.domain.protocols.suggestible import Mentionable
from mentionkit.domain.protocols.tokenizer import Tokenizer
from mentionkit.domain.types.tokens import CommittedMentionRegion
from mentionkit.logger import get_logger
from mentionkit.tokenization import SpanIndex, WordTokenizer, find_token_window
from mentionkit.tokenization.word_tokenizer import Regions

logger = get_logger("mentions.editing")


@dataclass(frozen=True, slots=True)
class MentionEdit:
    """Editor state after a mention was inserted or deleted."""

    text: str
    cursor: int
    regions: SpanIndex
    span: MentionSpan | None = None
    """The inserted (or shrunk) mention span, None after a full delete."""


def _shift_regions(
    index: SpanIndex, after: int, delta: int, exclude: CommittedMentionRegion | None = None
) -> list[CommittedMentionRegion]:
    shifted = []
    for region in index:
        if region == exclude:
            continue
        shifted.append(region.shifted(delta) if region.start >= after else region)
    return shifted


def insert_mention(
    text: str,
    cursor: int,
    mention: Mentionable,
    tokenizer: Tokenizer | None = None,
    regions: Regions = None,
) -> MentionEdit | None:
    """Replace the token at ``cursor`` with ``mention``.

    The mention's full display text is inserted, followed by a space unless
    one already follows the token, and the cursor is placed after it.

    Returns:
        The new editor state, or None when no valid token is active

    Raises:
        InvalidRegionError: If the mention's display text is empty
    """
    tokenizer = tokenizer or WordTokenizer()
    index = SpanIndex.coerce(regions)
    window = find_token_window(tokenizer, text, cursor, index)
    if window is None or not tokenizer.is_valid_mention(text, window.start, window.end):
        logger.debug(f"No valid token at cursor={cursor}; mention not inserted")
        return None

    display = mention.text_for_display_mode(MentionDisplayMode.FULL)
    suffix = "" if text[window.end : window.end + 1] == " " else " "
    new_text = text[: window.start] + display + suffix + text[window.end :]
    delta = len(display) + len(suffix) - (window.end - window.start)

    region = CommittedMentionRegion(window.start, window.start + len(display))
    new_regions = SpanIndex([*_shift_regions(index, window.end, delta), region])
    logger.info(
        f"Inserted mention {mention.primary_text!r} over {window.token_string!r} at [{region.start}, {region.end})"
    )
    return MentionEdit(
        text=new_text,
        cursor=region.end + 1,
        regions=new_regions,
        span=MentionSpan(mention=mention, region=region),
    )


def delete_mention(text: str, span: MentionSpan, regions: Regions = None) -> MentionEdit:
    """Delete ``span`` according to its mention's delete style.

    ``PARTIAL_NAME_DELETE`` first shrinks a fully displayed mention to its
    partial text; deleting it again removes it. Everything else removes the
    whole span.
    """
    index = SpanIndex.coerce(regions) if regions is not None else SpanIndex([span.region])
    region = span.region

    if (
        span.mention.delete_style == MentionDeleteStyle.PARTIAL_NAME_DELETE
        and span.display_mode == MentionDisplayMode.FULL
    ):
        partial = span.mention.text_for_display_mode(MentionDisplayMode.PARTIAL)
        if partial and len(partial) < len(region):
            new_region = CommittedMentionRegion(region.start, region.start + len(partial))
            delta = len(partial) - len(region)
            new_regions = SpanIndex([*_shift_regions(index, region.end, delta, exclude=region), new_region])
            logger.info(f"Shrunk mention {span.mention.primary_text!r} to {partial!r}")
            return MentionEdit(
                text=text[: region.start] + partial + text[region.end :],
                cursor=new_region.end,
                regions=new_regions,
                span=span.with_display_mode(MentionDisplayMode.PARTIAL).with_region(new_region),
            )

    new_regions = SpanIndex(_shift_regions(index, region.end, -len(region), exclude=region))
    logger.info(f"Deleted mention {span.mention.primary_text!r} at [{region.start}, {region.end})")
    return MentionEdit(
        text=text[: region.start] + text[region.end :],
        cursor=region.start,
        regions=new_regions,
    )


def locate_edit(old_text: str, new_text: str, cursor: int | None = None) -> tuple[int, int, int]:
    """Return ``(start, old_end, new_end)`` of the range replaced to turn ``old_text`` into ``new_text``.

    The common suffix is matched first, so an insertion in front of equal
    characters is placed before them. ``cursor`` is the cursor after the
    edit; the replaced range never ends before it, which places typing
    directly after equal characters at the cursor.
    """
    old_end, new_end = len(old_text), len(new_text)
    floor = 0 if cursor is None else min(max(cursor, 0), new_end)
    while old_end > 0 and new_end > floor and old_text[old_end - 1] == new_text[new_end - 1]:
        old_end -= 1
        new_end -= 1

    start = 0
    limit = min(old_end, new_end)
    while start < limit and old_text[start] == new_text[start]:
        start += 1
    return start, old_end, new_end


def follow_edit(
    region: CommittedMentionRegion, old_text: str, new_text: str, cursor: int | None = None
) -> CommittedMentionRegion | None:
    """Move ``region`` along with an edit of the surrounding text.

    Returns:
        The region in ``new_text``, or None when the edit touched the region
    """
    start, old_end, new_end = locate_edit(old_text, new_text, cursor)
    if region.end <= start:
        return region
    if region.start >= old_end:
        return region.shifted(new_end - old_end)
    return None
