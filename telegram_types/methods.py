"""Bot API methods: request parameters plus the response type each one declares.

Every request model knows its endpoint name and its response type, so a
transport only needs three calls::

    request = SendMessage(chat_id=chat_target_id(42), text="hi")
    body = request.encode()                  # JSON bytes
    address = request.url(token)             # https://api.telegram.org/bot<token>/sendMessage
    message = request.decode_response(raw).into_outcome()

Uploads go as ``multipart/form-data``: reference each file part with
:meth:`InputFile.attach` and send :meth:`Method.encode_form` as the text
fields.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Sequence, Union

from pydantic import Field, StrictBool

from core.logger import TelegramTypesLogger
from telegram_types.codec import TelegramModel, untagged_union
from telegram_types.ids import ChatId, FileId, InlineQueryId, MessageId, UpdateId, UserId
from telegram_types.inline_mode import InlineQueryResult
from telegram_types.models import (
    Chat,
    ChatMember,
    FileToSend,
    ForceReply,
    InlineKeyboardMarkup,
    InputFile,
    InputMedia,
    Message,
    ParseMode,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    Url,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from telegram_types.result import TelegramResult
from telegram_types.update import Update, UpdateType, next_offset

logger = TelegramTypesLogger.get_logger()


# ── Request-side unions ──────────────────────────────────────────────────────

# A JSON integer is always an id and a JSON string always a username, so
# "42" stays a username.
ChatTarget = untagged_union("ChatTarget", ChatId, str)


def chat_target_id(value: int) -> ChatId:
    """Target a chat by its numeric identifier."""
    return ChatId(value)


def chat_target_username(name: str) -> str:
    """Target a public chat or channel by ``@username``."""
    return name if name.startswith("@") else f"@{name}"


# URL first: an ``https://`` string is never taken for a file id.
File = untagged_union("File", Url, FileId)

ReplyMarkup = untagged_union(
    "ReplyMarkup",
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
)

# Edits of inline messages answer ``true`` instead of the edited message.
EditResult = untagged_union("EditResult", Message, StrictBool)


def build_url(token: str, name: str, base_url: Optional[str] = None) -> str:
    """Return ``<base_url>/bot<token>/<name>``.

    *base_url* defaults to ``TELEGRAM_API_URL`` from :mod:`config`.
    """
    if base_url is None:
        from config import TELEGRAM_API_URL  # read at call time

        base_url = TELEGRAM_API_URL
    return f"{base_url.rstrip('/')}/bot{token}/{name}"


# ── Method contract ──────────────────────────────────────────────────────────


class Method(TelegramModel):
    """Base class for request models.

    Subclasses set ``NAME`` (the endpoint, e.g. ``"sendMessage"``) and
    ``Item`` (the type of ``result`` in a successful response).
    """

    NAME: ClassVar[str] = ""
    Item: ClassVar[Any] = Any

    @classmethod
    def url(cls, token: str, base_url: Optional[str] = None) -> str:
        return build_url(token, cls.NAME, base_url)

    def encode(self) -> bytes:
        """JSON request body; unset optional fields are omitted."""
        return self.to_json().encode("utf-8")

    def encode_form(self) -> Dict[str, str]:
        """Top-level fields as ``multipart/form-data`` text parts.

        Strings are sent as-is; every other value is JSON encoded.
        """
        form: Dict[str, str] = {}
        for key, value in self.to_dict().items():
            form[key] = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
        return form

    def attachments(self) -> List[str]:
        """Names of the file parts this request references via ``attach://``."""
        return list(dict.fromkeys(_attach_names(self)))

    @classmethod
    def decode_response(cls, raw: Union[bytes, str]) -> TelegramResult:
        """Decode a response body into ``TelegramResult[Item]``.

        Raises:
            pydantic.ValidationError: If the body is not a well-formed envelope.
        """
        logger.debug("Decoding response", extra={"endpoint": cls.NAME})
        return TelegramResult[cls.Item].decode(raw)

    def _with(self, **changes: Any) -> "Method":
        return self.model_validate({**dict(self), **changes})


def _attach_names(value: Any) -> Iterator[str]:
    # Only typed InputFile values count, never free text.
    if isinstance(value, InputFile):
        yield value.attach_name
    elif isinstance(value, TelegramModel):
        for name in type(value).model_fields:
            yield from _attach_names(getattr(value, name))
    elif isinstance(value, dict):
        for item in value.values():
            yield from _attach_names(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _attach_names(item)


class _Reply:
    """Adds :meth:`reply` to requests with ``reply_to_message_id``."""

    def reply(self, message_id: MessageId):
        return self._with(reply_to_message_id=message_id)


class _Formatted:
    def with_parse_mode(self, mode: ParseMode):
        return self._with(parse_mode=mode)


class _Markup:
    def with_reply_markup(self, markup: Any):
        return self._with(reply_markup=markup)


# ── Getting updates ──────────────────────────────────────────────────────────


class GetUpdates(Method):
    """Receive incoming updates using long polling."""

    NAME: ClassVar[str] = "getUpdates"
    Item: ClassVar[Any] = List[Update]

    offset: Optional[UpdateId] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[UpdateType]] = None

    def with_offset(self, offset: UpdateId) -> "GetUpdates":
        return self._with(offset=offset)

    def advance(self, updates: Sequence[Update]) -> "GetUpdates":
        """Return a copy whose ``offset`` confirms every update in *updates*."""
        return self._with(offset=next_offset(updates, self.offset))


class SetWebhook(Method):
    NAME: ClassVar[str] = "setWebhook"
    Item: ClassVar[Any] = bool

    # Aliased: ``url`` is taken by the endpoint address.
    webhook_url: str = Field(..., alias="url")
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[UpdateType]] = None


class DeleteWebhook(Method):
    NAME: ClassVar[str] = "deleteWebhook"
    Item: ClassVar[Any] = bool

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfo(Method):
    NAME: ClassVar[str] = "getWebhookInfo"
    Item: ClassVar[Any] = WebhookInfo


# ── Bot and chats ────────────────────────────────────────────────────────────


class GetMe(Method):
    """A simple method for testing the bot's auth token."""

    NAME: ClassVar[str] = "getMe"
    Item: ClassVar[Any] = User


class GetUserProfilePhotos(Method):
    NAME: ClassVar[str] = "getUserProfilePhotos"
    Item: ClassVar[Any] = UserProfilePhotos

    user_id: UserId
    offset: Optional[int] = None
    limit: Optional[int] = None


class GetChat(Method):
    NAME: ClassVar[str] = "getChat"
    Item: ClassVar[Any] = Chat

    chat_id: ChatTarget


class GetChatAdministrators(Method):
    """List the administrators of a chat, bots excluded."""

    NAME: ClassVar[str] = "getChatAdministrators"
    Item: ClassVar[Any] = List[ChatMember]

    chat_id: ChatTarget


class GetChatMembersCount(Method):
    NAME: ClassVar[str] = "getChatMembersCount"
    Item: ClassVar[Any] = int

    chat_id: ChatTarget


class GetChatMember(Method):
    NAME: ClassVar[str] = "getChatMember"
    Item: ClassVar[Any] = ChatMember

    chat_id: ChatTarget
    user_id: UserId


# ── Sending messages ─────────────────────────────────────────────────────────


class SendMessage(_Reply, _Formatted, _Markup, Method):
    """Send a text message."""

    NAME: ClassVar[str] = "sendMessage"
    Item: ClassVar[Any] = Message

    chat_id: ChatTarget
    text: str
    parse_mode: Optional[ParseMode] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[MessageId] = None
    reply_markup: Optional[ReplyMarkup] = None


class ForwardMessage(Method):
    NAME: ClassVar[str] = "forwardMessage"
    Item: ClassVar[Any] = Message

    chat_id: ChatTarget
    from_chat_id: ChatTarget
    message_id: MessageId
    disable_notification: Optional[bool] = None


class SendSticker(_Reply, _Markup, Method):
    """Send a .webp sticker by URL or file id."""

    NAME: ClassVar[str] = "sendSticker"
    Item: ClassVar[Any] = Message

    chat_id: ChatTarget
    sticker: File
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[MessageId] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPhoto(_Reply, _Formatted, _Markup, Method):
    NAME: ClassVar[str] = "sendPhoto"
    Item: ClassVar[Any] = Message

    chat_id: ChatTarget
    photo: FileToSend
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[MessageId] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDocument(_Reply, _Formatted, _Markup, Method):
    """Send a general file; bots can currently send files of up to 50 MB."""

    NAME: ClassVar[str] = "sendDocument"
    Item: ClassVar[Any] = Message

    chat_id: ChatTarget
    document: FileToSend
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[MessageId] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendMediaGroup(_Reply, Method):
    """Send a group of photos, videos, documents or audios as an album."""

    NAME: ClassVar[str] = "sendMediaGroup"
    Item: ClassVar[Any] = List[Message]

    chat_id: ChatTarget
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[MessageId] = None


# ── Updating messages ────────────────────────────────────────────────────────


class EditMessageText(_Formatted, _Markup, Method):
    """Edit a text or game message.

    Identify the message either by ``chat_id`` plus ``message_id`` or by
    ``inline_message_id``.
    """

    NAME: ClassVar[str] = "editMessageText"
    Item: ClassVar[Any] = EditResult

    text: str
    chat_id: Optional[ChatTarget] = None
    message_id: Optional[MessageId] = None
    inline_message_id: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def disable_preview(self) -> "EditMessageText":
        return self._with(disable_web_page_preview=True)


class EditMessageCaption(_Formatted, _Markup, Method):
    NAME: ClassVar[str] = "editMessageCaption"
    Item: ClassVar[Any] = EditResult

    chat_id: Optional[ChatTarget] = None
    message_id: Optional[MessageId] = None
    inline_message_id: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(_Markup, Method):
    NAME: ClassVar[str] = "editMessageReplyMarkup"
    Item: ClassVar[Any] = EditResult

    chat_id: Optional[ChatTarget] = None
    message_id: Optional[MessageId] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(Method):
    NAME: ClassVar[str] = "deleteMessage"
    Item: ClassVar[Any] = bool

    chat_id: ChatTarget
    message_id: MessageId


# ── Inline mode ──────────────────────────────────────────────────────────────


class AnswerInlineQuery(Method):
    """Send answers to an inline query; no more than 50 results are allowed."""

    NAME: ClassVar[str] = "answerInlineQuery"
    Item: ClassVar[Any] = bool

    inline_query_id: InlineQueryId
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None
