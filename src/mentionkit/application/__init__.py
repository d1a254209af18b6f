"""Application layer: editor glue around the tokenizer and aggregator."""

from .mention_editing import MentionEdit, delete_mention, follow_edit, insert_mention, locate_edit
from .mentions_controller import MentionsController

__all__ = [
    "MentionEdit",
    "delete_mention",
    "follow_edit",
    "insert_mention",
    "locate_edit",
    "MentionsController",
]
