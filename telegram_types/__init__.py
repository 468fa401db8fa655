"""Typed data model for the Telegram Bot API — Pydantic models bound to the JSON wire format.

Request parameter models (:mod:`telegram_types.methods`), the response
envelope :class:`TelegramResult` and the update/message object graph.  No
HTTP client is included: a transport sends :meth:`Method.encode` to
:meth:`Method.url` and feeds the body back to :meth:`Method.decode_response`.

Usage::

    from telegram_types import GetUpdates, MessageContent, next_offset
    from telegram_types.models import Message, Chat
    from telegram_types.exceptions import ApiError
"""

from telegram_types.exceptions import ApiError
from telegram_types.ids import ChatId, FileId, InlineQueryId, MessageId, ResultId, UpdateId, UserId
from telegram_types.inline_mode import ChosenInlineResult, InlineQuery, InlineQueryResult, InputMessageContent
from telegram_types.methods import (
    AnswerInlineQuery,
    ChatTarget,
    DeleteMessage,
    DeleteWebhook,
    EditMessageCaption,
    EditMessageReplyMarkup,
    EditMessageText,
    File,
    ForwardMessage,
    GetChat,
    GetChatAdministrators,
    GetChatMember,
    GetChatMembersCount,
    GetMe,
    GetUpdates,
    GetUserProfilePhotos,
    GetWebhookInfo,
    Method,
    ReplyMarkup,
    SendDocument,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendSticker,
    SetWebhook,
    build_url,
    chat_target_id,
    chat_target_username,
)
from telegram_types.models import (
    Chat,
    ChatMemberStatus,
    ChatType,
    File as TelegramFile,
    FileToSend,
    InlineKeyboardButtonPressed,
    InputFile,
    InputMedia,
    Message,
    MessageEntityKind,
    ParseMode,
    User,
)
from telegram_types.result import TelegramResult
from telegram_types.update import (
    CallbackQueryContent,
    ChannelPostContent,
    ChatJoinRequestContent,
    ChatMemberContent,
    ChosenInlineResultContent,
    EditedChannelPostContent,
    EditedMessageContent,
    InlineQueryContent,
    MessageContent,
    MyChatMemberContent,
    PollAnswerContent,
    PollContent,
    PreCheckoutQueryContent,
    ShippingQueryContent,
    UnknownContent,
    Update,
    UpdateContent,
    UpdateType,
    next_offset,
)

__all__ = [
    "ApiError",
    "TelegramResult",
    # identifiers
    "ChatId",
    "FileId",
    "InlineQueryId",
    "MessageId",
    "ResultId",
    "UpdateId",
    "UserId",
    # objects
    "Chat",
    "ChatMemberStatus",
    "ChatType",
    "ChosenInlineResult",
    "FileToSend",
    "InlineKeyboardButtonPressed",
    "InlineQuery",
    "InlineQueryResult",
    "InputFile",
    "InputMedia",
    "InputMessageContent",
    "Message",
    "MessageEntityKind",
    "ParseMode",
    "TelegramFile",
    "User",
    # updates
    "CallbackQueryContent",
    "ChannelPostContent",
    "ChatJoinRequestContent",
    "ChatMemberContent",
    "ChosenInlineResultContent",
    "EditedChannelPostContent",
    "EditedMessageContent",
    "InlineQueryContent",
    "MessageContent",
    "MyChatMemberContent",
    "PollAnswerContent",
    "PollContent",
    "PreCheckoutQueryContent",
    "ShippingQueryContent",
    "UnknownContent",
    "Update",
    "UpdateContent",
    "UpdateType",
    "next_offset",
    # methods
    "AnswerInlineQuery",
    "ChatTarget",
    "DeleteMessage",
    "DeleteWebhook",
    "EditMessageCaption",
    "EditMessageReplyMarkup",
    "EditMessageText",
    "File",
    "ForwardMessage",
    "GetChat",
    "GetChatAdministrators",
    "GetChatMember",
    "GetChatMembersCount",
    "GetMe",
    "GetUpdates",
    "GetUserProfilePhotos",
    "GetWebhookInfo",
    "Method",
    "ReplyMarkup",
    "SendDocument",
    "SendMediaGroup",
    "SendMessage",
    "SendPhoto",
    "SendSticker",
    "SetWebhook",
    "build_url",
    "chat_target_id",
    "chat_target_username",
]
