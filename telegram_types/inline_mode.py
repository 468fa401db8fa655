"""Inline mode objects: incoming queries, chosen results and the results a bot answers with."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, Tag

from telegram_types.codec import UNKNOWN_TAG, TelegramModel, rebuild_models, tagged_by, untagged_union
from telegram_types.ids import InlineQueryId, ResultId
from telegram_types.models import InlineKeyboardMarkup, Location, MessageEntity, ParseMode, User


class InlineQuery(TelegramModel):
    """An incoming inline query.

    When the user sends an empty query, the bot could return some default or
    trending results.
    """

    id: InlineQueryId
    from_field: User = Field(..., alias="from")
    query: str
    offset: str
    location: Optional[Location] = None


class ChosenInlineResult(TelegramModel):
    """A result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: ResultId
    from_field: User = Field(..., alias="from")
    query: str
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None


# ── Input message content ────────────────────────────────────────────────────


class InputTextMessageContent(TelegramModel):
    message_text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputVenueMessageContent(TelegramModel):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None


class InputLocationMessageContent(TelegramModel):
    latitude: float
    longitude: float
    live_period: Optional[int] = None


class InputContactMessageContent(TelegramModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


# Venue before location: a location's required fields are a subset of a venue's.
InputMessageContent = untagged_union(
    "InputMessageContent",
    InputTextMessageContent,
    InputVenueMessageContent,
    InputLocationMessageContent,
    InputContactMessageContent,
)


# ── Inline query results ─────────────────────────────────────────────────────


class InlineQueryResultArticle(TelegramModel):
    """A link to an article or web page."""

    type: Literal["article"] = "article"
    id: ResultId
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional[InlineKeyboardMarkup] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(TelegramModel):
    type: Literal["photo"] = "photo"
    id: ResultId
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(TelegramModel):
    type: Literal["gif"] = "gif"
    id: ResultId
    gif_url: str
    thumb_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultMpeg4Gif(TelegramModel):
    """A video animation (H.264/MPEG-4 AVC video without sound)."""

    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: ResultId
    mpeg4_url: str
    thumb_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(TelegramModel):
    type: Literal["video"] = "video"
    id: ResultId
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(TelegramModel):
    type: Literal["audio"] = "audio"
    id: ResultId
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVoice(TelegramModel):
    """A voice recording in an .OGG container encoded with OPUS."""

    type: Literal["voice"] = "voice"
    id: ResultId
    voice_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(TelegramModel):
    type: Literal["document"] = "document"
    id: ResultId
    title: str
    document_url: str
    mime_type: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(TelegramModel):
    type: Literal["location"] = "location"
    id: ResultId
    latitude: float
    longitude: float
    title: str
    live_period: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(TelegramModel):
    type: Literal["venue"] = "venue"
    id: ResultId
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(TelegramModel):
    type: Literal["contact"] = "contact"
    id: ResultId
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(TelegramModel):
    type: Literal["game"] = "game"
    id: ResultId
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class UnknownInlineQueryResult(TelegramModel):
    """A result type this library does not know yet; keeps the raw fields."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None


INLINE_QUERY_RESULT_TYPES = (
    "article",
    "photo",
    "gif",
    "mpeg4_gif",
    "video",
    "audio",
    "voice",
    "document",
    "location",
    "venue",
    "contact",
    "game",
)

InlineQueryResult = Annotated[
    Union[
        Annotated[InlineQueryResultArticle, Tag("article")],
        Annotated[InlineQueryResultPhoto, Tag("photo")],
        Annotated[InlineQueryResultGif, Tag("gif")],
        Annotated[InlineQueryResultMpeg4Gif, Tag("mpeg4_gif")],
        Annotated[InlineQueryResultVideo, Tag("video")],
        Annotated[InlineQueryResultAudio, Tag("audio")],
        Annotated[InlineQueryResultVoice, Tag("voice")],
        Annotated[InlineQueryResultDocument, Tag("document")],
        Annotated[InlineQueryResultLocation, Tag("location")],
        Annotated[InlineQueryResultVenue, Tag("venue")],
        Annotated[InlineQueryResultContact, Tag("contact")],
        Annotated[InlineQueryResultGame, Tag("game")],
        Annotated[UnknownInlineQueryResult, Tag(UNKNOWN_TAG)],
    ],
    tagged_by("type", INLINE_QUERY_RESULT_TYPES, union="InlineQueryResult"),
]


rebuild_models(globals())
