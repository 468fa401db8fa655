"""Tests for the Bot API object graph in telegram_types.models."""

import sys
import os
import pytest

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_types.ids import ChatId, FileId, MessageId, UserId
from telegram_types.models import (
    CallbackQuery,
    Chat,
    ChannelChat,
    File,
    GroupChat,
    InlineKeyboardMarkup,
    Message,
    MessageEntity,
    MessageEntityKind,
    PhotoSize,
    PrivateChat,
    ResponseParameters,
    SupergroupChat,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from pydantic import ValidationError


USER = {"id": 42, "is_bot": False, "first_name": "Ada"}
PRIVATE_CHAT = {"id": 42, "type": "private", "first_name": "Ada"}


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == UserId(42)
        assert u.is_bot is False
        assert u.first_name == "Ada"
        assert u.last_name is None
        assert u.username is None

    def test_full_user(self) -> None:
        u = User(
            id=99,
            is_bot=True,
            first_name="Bot",
            last_name="User",
            username="testbot",
            language_code="en",
        )
        assert u.username == "testbot"
        assert u.language_code == "en"

    def test_64_bit_id(self) -> None:
        """Telegram IDs can be 64-bit integers."""
        big_id = 5_000_000_000
        u = User(id=big_id, is_bot=False, first_name="Big")
        assert u.id.value == big_id

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User.model_validate({"id": 1, "is_bot": False})

    def test_frozen(self) -> None:
        u = User.model_validate(USER)
        with pytest.raises(ValidationError):
            u.first_name = "Eve"


# ── Chat ─────────────────────────────────────────────────────────────────────


class TestChatModel:
    """Validate the flattened Chat / ChatType pair."""

    def test_private_chat(self) -> None:
        c = Chat.model_validate(PRIVATE_CHAT)
        assert c.id == ChatId(42)
        assert isinstance(c.kind, PrivateChat)
        assert c.kind.first_name == "Ada"
        assert c.type == "private"

    def test_negative_group_id(self) -> None:
        """Groups/channels use negative IDs."""
        c = Chat.model_validate({"id": -1001234567890, "type": "supergroup", "title": "Dev"})
        assert c.id.value < 0
        assert isinstance(c.kind, SupergroupChat)
        assert c.title == "Dev"

    def test_group_defaults(self) -> None:
        c = Chat.model_validate({"id": -5, "type": "group", "title": "Friends"})
        assert isinstance(c.kind, GroupChat)
        assert c.kind.all_members_are_administrators is False

    def test_channel_username(self) -> None:
        c = Chat.model_validate({"id": -7, "type": "channel", "title": "News", "username": "news"})
        assert isinstance(c.kind, ChannelChat)
        assert c.username == "news"

    def test_keyword_construction(self) -> None:
        c = Chat(id=ChatId(1), kind=PrivateChat(first_name="Ada"))
        assert c.to_dict() == {"id": 1, "type": "private", "first_name": "Ada"}

    def test_wire_key_named_kind_is_still_nested(self) -> None:
        c = Chat.model_validate({"id": 1, "type": "private", "first_name": "Ada", "kind": "bot"})
        assert isinstance(c.kind, PrivateChat)
        assert c.kind.first_name == "Ada"

    def test_wire_form_is_flat(self) -> None:
        c = Chat.model_validate(PRIVATE_CHAT)
        assert c.to_dict() == PRIVATE_CHAT

    def test_missing_type_specific_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            Chat.model_validate({"id": -5, "type": "group"})

    def test_pinned_message_in_supergroup(self) -> None:
        data = {
            "id": -100,
            "type": "supergroup",
            "title": "Dev",
            "pinned_message": {"message_id": 3, "date": 0, "chat": {"id": -100, "type": "supergroup", "title": "Dev"}},
        }
        c = Chat.model_validate(data)
        assert c.kind.pinned_message.message_id == MessageId(3)


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    """Validate the Message schema."""

    def _message(self, **extra) -> Message:
        data = {"message_id": 100, "date": 1609459200, "chat": PRIVATE_CHAT, "from": USER}
        data.update(extra)
        return Message.model_validate(data)

    def test_from_alias(self) -> None:
        """The wire field 'from' is exposed as 'from_field'."""
        m = self._message(text="hello")
        assert m.from_field is not None
        assert m.from_field.first_name == "Ada"
        assert m.to_dict()["from"]["id"] == 42

    def test_defaults(self) -> None:
        m = self._message()
        assert m.entities == []
        assert m.photo == []
        assert m.new_chat_members == []
        assert m.delete_chat_photo is False
        assert m.group_chat_created is False
        assert m.text is None

    def test_reply_to_message_nests(self) -> None:
        inner = {"message_id": 1, "date": 0, "chat": PRIVATE_CHAT, "text": "first"}
        m = self._message(reply_to_message=inner)
        assert m.reply_to_message.text == "first"

    def test_migrate_ids_are_chat_ids(self) -> None:
        m = self._message(migrate_to_chat_id=-100123)
        assert m.migrate_to_chat_id == ChatId(-100123)

    def test_entities(self) -> None:
        m = self._message(text="#tag", entities=[{"type": "hashtag", "offset": 0, "length": 4}])
        assert m.entities[0].kind is MessageEntityKind.HASHTAG

    def test_photo_sizes(self) -> None:
        m = self._message(photo=[{"file_id": "abc", "width": 100, "height": 200}])
        assert m.photo[0].file_id == FileId("abc")

    def test_missing_chat_raises(self) -> None:
        with pytest.raises(ValidationError):
            Message.model_validate({"message_id": 1, "date": 0})


# ── MessageEntity ────────────────────────────────────────────────────────────


class TestMessageEntityModel:
    def test_type_alias(self) -> None:
        e = MessageEntity.model_validate({"type": "bold", "offset": 0, "length": 5})
        assert e.kind is MessageEntityKind.BOLD
        assert e.to_dict() == {"type": "bold", "offset": 0, "length": 5}

    def test_text_mention_user(self) -> None:
        e = MessageEntity.model_validate({"type": "text_mention", "offset": 0, "length": 3, "user": USER})
        assert e.user.id == UserId(42)


# ── Media and files ──────────────────────────────────────────────────────────


class TestFileModels:
    def test_photo_size_required(self) -> None:
        p = PhotoSize(file_id="abc", file_unique_id="xyz", width=100, height=200)
        assert p.width == 100
        assert p.file_id == FileId("abc")

    def test_profile_photos(self) -> None:
        photos = UserProfilePhotos.model_validate(
            {"total_count": 1, "photos": [[{"file_id": "a", "width": 1, "height": 1}]]}
        )
        assert photos.photos[0][0].file_id == FileId("a")

    def test_download_url(self) -> None:
        f = File(file_id="abc", file_path="photos/file_1.jpg")
        url = f.download_url("123:TOKEN", base_url="https://api.telegram.org")
        assert url == "https://api.telegram.org/file/bot123:TOKEN/photos/file_1.jpg"

    def test_download_url_without_path(self) -> None:
        assert File(file_id="abc").download_url("123:TOKEN") is None


# ── Keyboards and callbacks ──────────────────────────────────────────────────


class TestInlineKeyboardMarkup:
    def test_nested_buttons(self) -> None:
        data = {
            "inline_keyboard": [
                [{"text": "Click", "callback_data": "action"}]
            ]
        }
        kb = InlineKeyboardMarkup.model_validate(data)
        assert len(kb.inline_keyboard) == 1
        assert kb.inline_keyboard[0][0].text == "Click"
        assert kb.to_dict() == data

    def test_missing_marker_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            InlineKeyboardMarkup.model_validate({})


class TestCallbackQueryModel:
    def test_from_alias(self) -> None:
        q = CallbackQuery.model_validate(
            {"id": "1", "from": USER, "chat_instance": "ci", "data": "yes"}
        )
        assert q.from_field.id == UserId(42)
        assert q.data == "yes"


# ── Bot-level objects ────────────────────────────────────────────────────────


class TestWebhookInfoModel:
    def test_required_fields(self) -> None:
        wh = WebhookInfo(url="https://example.com", has_custom_certificate=False, pending_update_count=0)
        assert wh.url == "https://example.com"


class TestResponseParameters:
    def test_migrate_id(self) -> None:
        p = ResponseParameters.model_validate({"migrate_to_chat_id": -100})
        assert p.migrate_to_chat_id == ChatId(-100)
        assert p.retry_after is None


# ── Serialization round-trip ─────────────────────────────────────────────────


class TestRoundTrip:
    """Ensure models can serialize to dict and back."""

    def test_user_round_trip(self) -> None:
        u = User(id=1, is_bot=False, first_name="Test")
        data = u.to_dict()
        u2 = User.model_validate(data)
        assert u == u2

    def test_message_json_round_trip(self) -> None:
        m = Message.model_validate(
            {"message_id": 1, "date": 0, "chat": PRIVATE_CHAT, "from": USER, "text": "hi"}
        )
        assert Message.model_validate_json(m.to_json()) == m
