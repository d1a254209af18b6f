"""Unit tests for mention insertion and deletion."""

import pytest

from mentionkit.application import delete_mention, follow_edit, insert_mention, locate_edit
from mentionkit.domain.mentions import MentionDeleteStyle, MentionDisplayMode, MentionSpan, SimpleMention
from mentionkit.domain.types import CommittedMentionRegion

JOHN = SimpleMention(1, "John Doe")
PARTIAL_JOHN = SimpleMention(1, "John Doe", delete_style=MentionDeleteStyle.PARTIAL_NAME_DELETE)


class TestInsertMention:
    """Tests for insert_mention."""

    def test_replaces_explicit_token(self):
        edit = insert_mention("Hello @Jo", 9, JOHN)

        assert edit is not None
        assert edit.text == "Hello John Doe "
        assert edit.cursor == 15
        assert list(edit.regions) == [CommittedMentionRegion(6, 14)]
        assert edit.span.region == CommittedMentionRegion(6, 14)
        assert edit.span.display_string() == "John Doe"

    def test_replaces_implicit_token(self):
        edit = insert_mention("call john", 9, JOHN)

        assert edit is not None
        assert edit.text == "call John Doe "
        assert list(edit.regions) == [CommittedMentionRegion(5, 13)]

    def test_shifts_later_regions(self):
        text = "Hello @Jo and @Ann"
        edit = insert_mention(text, 9, JOHN, regions=[CommittedMentionRegion(14, 18)])

        assert edit is not None
        assert edit.text == "Hello John Doe and @Ann"
        assert edit.cursor == 15
        assert list(edit.regions) == [CommittedMentionRegion(6, 14), CommittedMentionRegion(19, 23)]
        assert edit.text[19:23] == "@Ann"

    def test_no_active_token(self):
        assert insert_mention("Hi there", 2, JOHN) is None


class TestDeleteMention:
    """Tests for delete_mention."""

    def test_full_delete(self):
        span = MentionSpan(JOHN, CommittedMentionRegion(6, 14))
        regions = [CommittedMentionRegion(6, 14), CommittedMentionRegion(19, 23)]

        edit = delete_mention("Hello John Doe and @Ann", span, regions)

        assert edit.text == "Hello  and @Ann"
        assert edit.cursor == 6
        assert edit.span is None
        assert list(edit.regions) == [CommittedMentionRegion(11, 15)]

    def test_partial_delete_then_full_delete(self):
        span = MentionSpan(PARTIAL_JOHN, CommittedMentionRegion(6, 14))

        first = delete_mention("Hello John Doe and", span)

        assert first.text == "Hello John and"
        assert first.span is not None
        assert first.span.display_mode == MentionDisplayMode.PARTIAL
        assert list(first.regions) == [CommittedMentionRegion(6, 10)]

        second = delete_mention(first.text, first.span, first.regions)

        assert second.text == "Hello  and"
        assert len(second.regions) == 0


class TestFollowEdit:
    """Tests for moving committed regions along with ordinary edits."""

    @pytest.mark.parametrize(
        "old, new, cursor, expected",
        [
            ("Hi John", "Hi xJohn", 4, (3, 3, 4)),
            ("Hi John", "Hi JJohn", 4, (3, 3, 4)),
            ("John", "Johnn", 5, (4, 4, 5)),
            ("Hi xJohn", "Hi John", 3, (3, 4, 3)),
            ("same", "same", 4, (4, 4, 4)),
        ],
    )
    def test_locate_edit(self, old, new, cursor, expected):
        assert locate_edit(old, new, cursor) == expected

    def test_typing_before_region_shifts_it(self):
        region = CommittedMentionRegion(6, 14)
        assert follow_edit(region, "Hello John Doe ", "Oh Hello John Doe ", 3) == CommittedMentionRegion(9, 17)

    def test_deleting_before_region_shifts_it(self):
        region = CommittedMentionRegion(6, 14)
        assert follow_edit(region, "Hello John Doe ", "Hell John Doe ", 4) == CommittedMentionRegion(5, 13)

    def test_typing_after_region_keeps_it(self):
        region = CommittedMentionRegion(0, 8)
        assert follow_edit(region, "John Doe", "John Doe!", 9) == region

    def test_editing_inside_region_drops_it(self):
        region = CommittedMentionRegion(0, 8)
        assert follow_edit(region, "John Doe ", "John Do ", 7) is None
