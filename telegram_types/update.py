"""Incoming updates.

An update is a flat JSON object: ``update_id`` plus at most one content
field whose *name* says what happened.  :class:`Update` exposes that field as
a typed :attr:`Update.content` variant::

    update = Update.model_validate_json(raw)
    if isinstance(update.content, MessageContent):
        print(update.content.message.text)
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Iterable, Optional, Sequence, Union

from pydantic import ConfigDict, Tag, model_serializer, model_validator

from core.logger import TelegramTypesLogger
from telegram_types.codec import (
    UNKNOWN_TAG,
    TelegramModel,
    first_present,
    flatten_field,
    is_nested,
    nest_fields,
    present_fields,
    rebuild_models,
)
from telegram_types.ids import UpdateId
from telegram_types.inline_mode import ChosenInlineResult, InlineQuery
from telegram_types.models import (
    CallbackQuery,
    ChatJoinRequest,
    ChatMemberUpdated,
    Message,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ShippingQuery,
)

logger = TelegramTypesLogger.get_logger()


class UpdateType(str, Enum):
    """Kinds of update, in content-field priority order.

    The values double as ``allowed_updates`` entries for ``getUpdates`` and
    ``setWebhook``.
    """

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"


CONTENT_FIELDS = tuple(update_type.value for update_type in UpdateType)


# ── Content variants ─────────────────────────────────────────────────────────


class _Content(TelegramModel):
    kind: ClassVar[Optional[UpdateType]] = None

    @property
    def payload(self) -> Any:
        """The decoded object carried by this update."""
        return getattr(self, self.kind.value)


class MessageContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.MESSAGE
    message: Message


class EditedMessageContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.EDITED_MESSAGE
    edited_message: Message


class ChannelPostContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.CHANNEL_POST
    channel_post: Message


class EditedChannelPostContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.EDITED_CHANNEL_POST
    edited_channel_post: Message


class InlineQueryContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.INLINE_QUERY
    inline_query: InlineQuery


class ChosenInlineResultContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.CHOSEN_INLINE_RESULT
    chosen_inline_result: ChosenInlineResult


class CallbackQueryContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.CALLBACK_QUERY
    callback_query: CallbackQuery


class ShippingQueryContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.SHIPPING_QUERY
    shipping_query: ShippingQuery


class PreCheckoutQueryContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.PRE_CHECKOUT_QUERY
    pre_checkout_query: PreCheckoutQuery


class PollContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.POLL
    poll: Poll


class PollAnswerContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.POLL_ANSWER
    poll_answer: PollAnswer


class MyChatMemberContent(_Content):
    """The bot's own member status changed in a chat."""

    kind: ClassVar[Optional[UpdateType]] = UpdateType.MY_CHAT_MEMBER
    my_chat_member: ChatMemberUpdated


class ChatMemberContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.CHAT_MEMBER
    chat_member: ChatMemberUpdated


class ChatJoinRequestContent(_Content):
    kind: ClassVar[Optional[UpdateType]] = UpdateType.CHAT_JOIN_REQUEST
    chat_join_request: ChatJoinRequest


class UnknownContent(_Content):
    """No known content field was present; the raw fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    @property
    def payload(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


UpdateContent = Annotated[
    Union[
        Annotated[MessageContent, Tag("message")],
        Annotated[EditedMessageContent, Tag("edited_message")],
        Annotated[ChannelPostContent, Tag("channel_post")],
        Annotated[EditedChannelPostContent, Tag("edited_channel_post")],
        Annotated[InlineQueryContent, Tag("inline_query")],
        Annotated[ChosenInlineResultContent, Tag("chosen_inline_result")],
        Annotated[CallbackQueryContent, Tag("callback_query")],
        Annotated[ShippingQueryContent, Tag("shipping_query")],
        Annotated[PreCheckoutQueryContent, Tag("pre_checkout_query")],
        Annotated[PollContent, Tag("poll")],
        Annotated[PollAnswerContent, Tag("poll_answer")],
        Annotated[MyChatMemberContent, Tag("my_chat_member")],
        Annotated[ChatMemberContent, Tag("chat_member")],
        Annotated[ChatJoinRequestContent, Tag("chat_join_request")],
        Annotated[UnknownContent, Tag(UNKNOWN_TAG)],
    ],
    first_present(CONTENT_FIELDS, union="UpdateContent"),
]


# ── Update ───────────────────────────────────────────────────────────────────


class Update(TelegramModel):
    """An incoming update.

    At most one content field is expected per update.  When several are
    present the first in :class:`UpdateType` order wins and a warning is
    logged; when none is, :attr:`content` is an :class:`UnknownContent` and
    the update should be skipped (its ``update_id`` still counts for the
    cursor).
    """

    update_id: UpdateId
    content: UpdateContent

    @model_validator(mode="before")
    @classmethod
    def _nest_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and not is_nested(data, ("update_id",), "content"):
            present = present_fields(data, CONTENT_FIELDS)
            if len(present) > 1:
                logger.warning(
                    "Update carries several content fields, keeping the first",
                    extra={"update_id": data.get("update_id"), "fields": present},
                )
            elif not present:
                logger.debug(
                    "Update carries no known content field",
                    extra={"update_id": data.get("update_id"), "fields": sorted(data)},
                )
        return nest_fields(data, keep=("update_id",), into="content")

    @model_serializer(mode="wrap")
    def _flatten_content(self, handler: Any) -> Dict[str, Any]:
        return flatten_field(handler(self), "content")

    @property
    def kind(self) -> Optional[UpdateType]:
        return self.content.kind

    @property
    def is_unknown(self) -> bool:
        """True when no recognised content field was present."""
        return isinstance(self.content, UnknownContent)


def next_offset(updates: Sequence[Update], current: Optional[UpdateId] = None) -> Optional[UpdateId]:
    """Return the ``offset`` for the next ``getUpdates`` call.

    That is the last update's id plus one, or *current* when the batch is
    empty.  Unknown updates count too, otherwise they would be redelivered.
    """
    if not updates:
        return current
    return updates[-1].update_id + 1


def known_updates(updates: Iterable[Update]) -> list:
    """Drop updates whose content is unknown."""
    return [update for update in updates if not update.is_unknown]


rebuild_models(globals())
