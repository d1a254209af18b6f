"""
Controller wiring the tokenizer to suggestion receivers and views.

Flow on every edit::

    text/cursor change -> TextTokenSource -> QueryTokenReceiver
                                                  |  (later, per bucket)
    SuggestionsVisibilityManager <- ResultAggregator <- on_receive_suggestions_result

All methods are expected to run on the text-editing thread.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Sequence
from functools import partial

from mentionkit.domain.events import (
    EventBus,
    QueryDispatched,
    QueryTokenChanged,
    SuggestionsUpdated,
    SuggestionsVisibilityChanged,
)
from mentionkit.domain.protocols import (
    Mentionable,
    QueryTokenReceiver,
    SuggestionsVisibilityManager,
    Tokenizer,
)
from mentionkit.domain.types import QueryToken, SuggestionsResult
from mentionkit.logger import get_logger
from mentionkit.suggestions import ResultAggregator
from mentionkit.tokenization import TextTokenSource
from mentionkit.tokenization.word_tokenizer import Regions

from .mention_editing import MentionEdit, insert_mention

logger = get_logger("mentions.controller")


class MentionsController:
    """Coordinates token detection, query dispatch and result aggregation.

    Args:
        receiver: Answers query tokens; may return its buckets directly or
            as an awaitable (then a running event loop is required)
        tokenizer: Tokenizer used for every edit
        aggregator: Aggregator for the per-bucket results
        visibility_manager: View toggled when suggestions appear or vanish
        event_bus: Bus receiving token, suggestion and visibility events
    """

    def __init__(
        self,
        receiver: QueryTokenReceiver,
        tokenizer: Tokenizer | None = None,
        aggregator: ResultAggregator | None = None,
        visibility_manager: SuggestionsVisibilityManager | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.receiver = receiver
        self.token_source = TextTokenSource(tokenizer)
        self.aggregator = aggregator or ResultAggregator()
        self.visibility_manager = visibility_manager
        self.event_bus = event_bus or EventBus()
        self._current_token: QueryToken | None = None
        self._previous_token: QueryToken | None = None
        self._visible = False
        self._pending_dispatch: asyncio.Future | None = None

    @property
    def tokenizer(self) -> Tokenizer:
        return self.token_source.tokenizer

    @property
    def current_token(self) -> QueryToken | None:
        return self._current_token

    def on_text_changed(self, text: str, cursor: int, regions: Regions = None) -> QueryToken | None:
        """Re-tokenize after an edit and dispatch a new query if the token changed."""
        token = self.token_source.update(text, cursor, regions)

        if token is None:
            if self._current_token is not None:
                logger.debug("No active mention token")
                self._cancel_pending_dispatch()
                self._reset()
            self._set_visible(False)
            return None

        if token == self._current_token:
            return token

        self._cancel_pending_dispatch()
        self._change_token(token)
        self.aggregator.notify_query_token_received(token, ())
        self._dispatch(token)
        return token

    def on_receive_suggestions_result(self, result: SuggestionsResult, bucket: str) -> None:
        """Accept a result from the receiver (SuggestionsResultListener contract)."""
        if not self.aggregator.add_suggestions(result, bucket):
            return

        suggestions = self.aggregator.suggestions
        self.event_bus.publish(
            SuggestionsUpdated(query_token=result.query_token, suggestions=suggestions, bucket=bucket)
        )
        self._set_visible(bool(suggestions))

    def is_waiting_for_results(self) -> bool:
        return self.aggregator.is_waiting_for_results()

    def select(self, mention: Mentionable) -> MentionEdit | None:
        """Insert ``mention`` over the current token and close the suggestions."""
        edit = insert_mention(
            self.token_source.text,
            self.token_source.cursor,
            mention,
            tokenizer=self.tokenizer,
            regions=self.token_source.regions,
        )
        if edit is None:
            return None

        self._cancel_pending_dispatch()
        self._reset()
        self.token_source.update(edit.text, edit.cursor, edit.regions)
        return edit

    def _dispatch(self, token: QueryToken) -> None:
        try:
            buckets = self.receiver.on_query_received(token)
        except Exception as e:
            self._on_receiver_failed(token, e)
            return

        if inspect.isawaitable(buckets):
            future = asyncio.ensure_future(buckets, loop=asyncio.get_running_loop())
            future.add_done_callback(partial(self._on_buckets_ready, token))
            self._pending_dispatch = future
        else:
            self._register_buckets(token, buckets)

    def _on_buckets_ready(self, token: QueryToken, future: asyncio.Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self._on_receiver_failed(token, error)
            return
        if token != self._current_token:
            logger.debug(f"Ignoring buckets for superseded token {token.token_string!r}")
            return
        self._register_buckets(token, future.result())

    def _on_receiver_failed(self, token: QueryToken, error: BaseException) -> None:
        # Forget the token so the next edit dispatches it again
        logger.opt(exception=error).error(f"Receiver failed for {token.token_string!r}: {error}")
        if token == self._current_token:
            self._reset()

    def _register_buckets(self, token: QueryToken, buckets: Sequence[str]) -> None:
        buckets = tuple(buckets)
        logger.debug(f"Query {token.token_string!r} dispatched; expecting buckets {buckets}")
        self.aggregator.notify_query_token_received(token, buckets)
        self.event_bus.publish(QueryDispatched(query_token=token, buckets=buckets))

    def _change_token(self, token: QueryToken | None) -> None:
        self._previous_token = self._current_token
        self._current_token = token
        self.event_bus.publish(QueryTokenChanged(query_token=token, previous_token=self._previous_token))

    def _reset(self) -> None:
        self._change_token(None)
        self.aggregator.clear()
        self._set_visible(False)

    def _cancel_pending_dispatch(self) -> None:
        if self._pending_dispatch is not None and not self._pending_dispatch.done():
            self._pending_dispatch.cancel()
        self._pending_dispatch = None

    def is_showing_suggestions(self) -> bool:
        if self.visibility_manager is not None:
            return self.visibility_manager.is_showing_suggestions()
        return self._visible

    def _set_visible(self, visible: bool) -> None:
        if self.is_showing_suggestions() == visible:
            return
        self._visible = visible
        if self.visibility_manager is not None:
            self.visibility_manager.set_suggestions_visible(visible)
        logger.info(f"Suggestions {'shown' if visible else 'hidden'}")
        self.event_bus.publish(SuggestionsVisibilityChanged(visible=visible))
