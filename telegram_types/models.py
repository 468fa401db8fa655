"""Pydantic models for the Telegram Bot API object graph.

Every class corresponds to an object of https://core.telegram.org/bots/api.
Decoding is strict about shape (missing required fields and wrong JSON
types raise :class:`pydantic.ValidationError`) but tolerant about the
future: unrecognised chat types, entity kinds, member statuses, parse modes,
button actions and media types decode to a reserved unknown arm.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    ConfigDict,
    Field,
    StringConstraints,
    Tag,
    model_serializer,
    model_validator,
)

from telegram_types.codec import (
    UNKNOWN_TAG,
    TelegramModel,
    UnknownFallbackEnum,
    first_present,
    flatten_field,
    nest_fields,
    rebuild_models,
    tagged_by,
    untagged_union,
)
from telegram_types.ids import ChatId, FileId, MessageId, Scalar, UserId

# Unix time in seconds.
Time = int

Url = Annotated[str, StringConstraints(pattern=r"^https?://")]


# ── Tagged enums ─────────────────────────────────────────────────────────────


class MessageEntityKind(UnknownFallbackEnum):
    """Type of a :class:`MessageEntity`."""

    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    UNKNOWN = "unknown"


class ChatMemberStatus(UnknownFallbackEnum):
    CREATOR = "creator"
    ADMINISTRATOR = "administrator"
    MEMBER = "member"
    RESTRICTED = "restricted"
    LEFT = "left"
    KICKED = "kicked"
    UNKNOWN = "unknown"


class ParseMode(UnknownFallbackEnum):
    """Formatting options for message text and captions."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"
    UNKNOWN = "Unknown"


# ── Users ────────────────────────────────────────────────────────────────────


class User(TelegramModel):
    """This object represents a Telegram user or bot."""

    id: UserId
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None


# ── Chats ────────────────────────────────────────────────────────────────────


class PrivateChat(TelegramModel):
    type: Literal["private"] = "private"
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None


class GroupChat(TelegramModel):
    type: Literal["group"] = "group"
    title: str
    username: Optional[str] = None
    all_members_are_administrators: bool = False


class SupergroupChat(TelegramModel):
    """A supergroup; the optional fields are returned only by ``getChat``."""

    type: Literal["supergroup"] = "supergroup"
    title: str
    username: Optional[str] = None
    all_members_are_administrators: bool = False
    pinned_message: Optional[Message] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    invite_link: Optional[str] = None
    description: Optional[str] = None


class ChannelChat(TelegramModel):
    type: Literal["channel"] = "channel"
    title: str
    username: Optional[str] = None
    pinned_message: Optional[Message] = None
    invite_link: Optional[str] = None
    description: Optional[str] = None


class UnknownChatType(TelegramModel):
    """A chat type this library does not know yet; keeps the raw fields."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None


ChatType = Annotated[
    Union[
        Annotated[PrivateChat, Tag("private")],
        Annotated[GroupChat, Tag("group")],
        Annotated[SupergroupChat, Tag("supergroup")],
        Annotated[ChannelChat, Tag("channel")],
        Annotated[UnknownChatType, Tag(UNKNOWN_TAG)],
    ],
    tagged_by("type", ("private", "group", "supergroup", "channel"), union="ChatType"),
]


class ChatPhoto(TelegramModel):
    small_file_id: FileId
    big_file_id: FileId
    small_file_unique_id: Optional[str] = None
    big_file_unique_id: Optional[str] = None


class Chat(TelegramModel):
    """This object represents a chat.

    On the wire the type-specific fields sit next to ``id``; here they live
    in :attr:`kind`, whose class says which type of chat this is.
    """

    id: ChatId
    photo: Optional[ChatPhoto] = None
    kind: ChatType

    @model_validator(mode="before")
    @classmethod
    def _nest_kind(cls, data: Any) -> Any:
        return nest_fields(data, keep=("id", "photo"), into="kind")

    @model_serializer(mode="wrap")
    def _flatten_kind(self, handler: Any) -> Dict[str, Any]:
        return flatten_field(handler(self), "kind")

    @property
    def type(self) -> Optional[str]:
        """The raw ``type`` tag, including unrecognised ones."""
        return self.kind.type

    @property
    def title(self) -> Optional[str]:
        return getattr(self.kind, "title", None)

    @property
    def username(self) -> Optional[str]:
        return getattr(self.kind, "username", None)


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramModel):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: FileId
    width: int
    height: int
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramModel):
    file_id: FileId
    duration: int
    file_unique_id: Optional[str] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramModel):
    """A general file (as opposed to photos, voice messages and audio files)."""

    file_id: FileId
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramModel):
    file_id: FileId
    width: int
    height: int
    duration: int
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Animation(TelegramModel):
    """GIF or H.264/MPEG-4 AVC video without sound."""

    file_id: FileId
    width: int
    height: int
    duration: int
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Voice(TelegramModel):
    file_id: FileId
    duration: int
    file_unique_id: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramModel):
    file_id: FileId
    length: int
    duration: int
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class MaskPosition(TelegramModel):
    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramModel):
    file_id: FileId
    width: int
    height: int
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramModel):
    name: str
    title: str
    contains_masks: bool
    stickers: List[Sticker] = Field(default_factory=list)


class File(TelegramModel):
    """A file ready to be downloaded from ``https://api.telegram.org/file/bot<token>/<file_path>``."""

    file_id: FileId
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    def download_url(self, token: str, base_url: Optional[str] = None) -> Optional[str]:
        """Return the download address, or ``None`` while ``file_path`` is unknown."""
        if self.file_path is None:
            return None
        if base_url is None:
            from config import TELEGRAM_API_URL  # read at call time

            base_url = TELEGRAM_API_URL
        return f"{base_url.rstrip('/')}/file/bot{token}/{self.file_path}"


class UserProfilePhotos(TelegramModel):
    total_count: int
    photos: List[List[PhotoSize]] = Field(default_factory=list)


# ── Message content ──────────────────────────────────────────────────────────


class MessageEntity(TelegramModel):
    """One special entity in a text message, e.g. a hashtag, username or URL.

    ``offset`` and ``length`` are measured in UTF-16 code units.
    """

    kind: MessageEntityKind = Field(alias="type")
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class Contact(TelegramModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[UserId] = None
    vcard: Optional[str] = None


class Location(TelegramModel):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None


class Venue(TelegramModel):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None


class PollOption(TelegramModel):
    text: str
    voter_count: int


class Poll(TelegramModel):
    """This object contains information about a poll."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: List[MessageEntity] = Field(default_factory=list)
    open_period: Optional[int] = None
    close_date: Optional[Time] = None


class PollAnswer(TelegramModel):
    """An answer of a user in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


# ── Keyboards ────────────────────────────────────────────────────────────────


class KeyboardButton(TelegramModel):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class ReplyKeyboardMarkup(TelegramModel):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramModel):
    remove_keyboard: bool
    selective: Optional[bool] = None


class ForceReply(TelegramModel):
    """Makes clients show a reply interface, as if the user tapped 'Reply'."""

    force_reply: bool
    selective: Optional[bool] = None


class LoginUrl(TelegramModel):
    """Inline button parameter used to authorize a user automatically."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackGame(TelegramModel):
    """A placeholder, currently holds no information."""


class UrlPress(TelegramModel):
    url: str


class CallbackDataPress(TelegramModel):
    callback_data: str


class SwitchInlineQueryPress(TelegramModel):
    switch_inline_query: str


class SwitchInlineQueryCurrentChatPress(TelegramModel):
    switch_inline_query_current_chat: str


class PayPress(TelegramModel):
    pay: bool


class CallbackGamePress(TelegramModel):
    callback_game: CallbackGame


class LoginUrlPress(TelegramModel):
    login_url: LoginUrl


class UnknownPress(TelegramModel):
    """A button action this library does not know yet; keeps the raw fields."""

    model_config = ConfigDict(extra="allow")


BUTTON_ACTION_FIELDS = (
    "url",
    "callback_data",
    "switch_inline_query",
    "switch_inline_query_current_chat",
    "pay",
    "callback_game",
    "login_url",
)

InlineKeyboardButtonPressed = Annotated[
    Union[
        Annotated[UrlPress, Tag("url")],
        Annotated[CallbackDataPress, Tag("callback_data")],
        Annotated[SwitchInlineQueryPress, Tag("switch_inline_query")],
        Annotated[SwitchInlineQueryCurrentChatPress, Tag("switch_inline_query_current_chat")],
        Annotated[PayPress, Tag("pay")],
        Annotated[CallbackGamePress, Tag("callback_game")],
        Annotated[LoginUrlPress, Tag("login_url")],
        Annotated[UnknownPress, Tag(UNKNOWN_TAG)],
    ],
    first_present(BUTTON_ACTION_FIELDS, union="InlineKeyboardButtonPressed"),
]


class InlineKeyboardButton(TelegramModel):
    """One button of an inline keyboard.

    Exactly one action field accompanies ``text`` on the wire; it is exposed
    as :attr:`pressed`.  Keyword construction accepts the flat form::

        InlineKeyboardButton(text="Open", url="https://example.com")
    """

    text: str
    pressed: InlineKeyboardButtonPressed

    @model_validator(mode="before")
    @classmethod
    def _nest_pressed(cls, data: Any) -> Any:
        return nest_fields(data, keep=("text",), into="pressed")

    @model_serializer(mode="wrap")
    def _flatten_pressed(self, handler: Any) -> Dict[str, Any]:
        return flatten_field(handler(self), "pressed")


class InlineKeyboardMarkup(TelegramModel):
    inline_keyboard: List[List[InlineKeyboardButton]]


# ── Messages ─────────────────────────────────────────────────────────────────


class Message(TelegramModel):
    """This object represents a message."""

    message_id: MessageId
    date: Time
    chat: Chat
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[MessageId] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[Time] = None
    reply_to_message: Optional[Message] = None
    edit_date: Optional[Time] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: List[MessageEntity] = Field(default_factory=list)
    caption: Optional[str] = None
    caption_entities: List[MessageEntity] = Field(default_factory=list)
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    animation: Optional[Animation] = None
    photo: List[PhotoSize] = Field(default_factory=list)
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    contact: Optional[Contact] = None
    location: Optional[Location] = None
    venue: Optional[Venue] = None
    poll: Optional[Poll] = None
    new_chat_members: List[User] = Field(default_factory=list)
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: List[PhotoSize] = Field(default_factory=list)
    delete_chat_photo: bool = False
    group_chat_created: bool = False
    supergroup_chat_created: bool = False
    channel_chat_created: bool = False
    migrate_to_chat_id: Optional[ChatId] = None
    migrate_from_chat_id: Optional[ChatId] = None
    pinned_message: Optional[Message] = None
    connected_website: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class MessageIdResult(TelegramModel):
    """This object represents a unique message identifier."""

    message_id: MessageId


class CallbackQuery(TelegramModel):
    """An incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: User = Field(alias="from")
    chat_instance: str
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None


# ── Chat members ─────────────────────────────────────────────────────────────


class ChatMember(TelegramModel):
    """This object contains information about one member of a chat."""

    user: User
    status: ChatMemberStatus
    until_date: Optional[Time] = None
    can_be_edited: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None


class ChatInviteLink(TelegramModel):
    invite_link: str
    creator: User
    is_primary: bool
    is_revoked: bool
    creates_join_request: Optional[bool] = None
    name: Optional[str] = None
    expire_date: Optional[Time] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatMemberUpdated(TelegramModel):
    """A change in the status of a chat member."""

    chat: Chat
    from_field: User = Field(alias="from")
    date: Time
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatJoinRequest(TelegramModel):
    """A join request sent to a chat."""

    chat: Chat
    from_field: User = Field(alias="from")
    date: Time
    bio: Optional[str] = None
    invite_link: Optional[ChatInviteLink] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class ShippingAddress(TelegramModel):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramModel):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingQuery(TelegramModel):
    """This object contains information about an incoming shipping query."""

    id: str
    from_field: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramModel):
    """This object contains information about an incoming pre-checkout query."""

    id: str
    from_field: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Bot-level objects ────────────────────────────────────────────────────────


class ResponseParameters(TelegramModel):
    """Why a request was unsuccessful and how it may be retried."""

    migrate_to_chat_id: Optional[ChatId] = None
    retry_after: Optional[int] = None


class WebhookInfo(TelegramModel):
    """Contains information about the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[Time] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Files to send ────────────────────────────────────────────────────────────


class InputFile(Scalar):
    """Reference to a multipart part uploaded alongside the request.

    Encodes as ``attach://<name>`` where ``<name>`` is the form field that
    carries the file.
    """

    _scalar_types = (str,)
    _scalar_name = "attach:// string"

    PREFIX = "attach://"

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return isinstance(value, str) and value.startswith(cls.PREFIX) and len(value) > len(cls.PREFIX)

    @classmethod
    def attach(cls, name: str) -> "InputFile":
        return cls(f"{cls.PREFIX}{name}")

    @property
    def attach_name(self) -> str:
        return self.value[len(self.PREFIX):]


# Decode order: upload placeholder, then URL, then any other string as a file id.
FileToSend = untagged_union("FileToSend", InputFile, Url, FileId)


class InputMediaPhoto(TelegramModel):
    type: Literal["photo"] = "photo"
    media: FileToSend
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None


class InputMediaVideo(TelegramModel):
    type: Literal["video"] = "video"
    media: FileToSend
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(TelegramModel):
    type: Literal["animation"] = "animation"
    media: FileToSend
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(TelegramModel):
    type: Literal["audio"] = "audio"
    media: FileToSend
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramModel):
    type: Literal["document"] = "document"
    media: FileToSend
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None


class UnknownInputMedia(TelegramModel):
    """A media type this library does not know yet; keeps the raw fields."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None


InputMedia = Annotated[
    Union[
        Annotated[InputMediaPhoto, Tag("photo")],
        Annotated[InputMediaVideo, Tag("video")],
        Annotated[InputMediaAnimation, Tag("animation")],
        Annotated[InputMediaAudio, Tag("audio")],
        Annotated[InputMediaDocument, Tag("document")],
        Annotated[UnknownInputMedia, Tag(UNKNOWN_TAG)],
    ],
    tagged_by("type", ("photo", "video", "animation", "audio", "document"), union="InputMedia"),
]


rebuild_models(globals())
