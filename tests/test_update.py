"""Tests for Update / UpdateContent decoding and the update cursor."""

import logging
import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from telegram_types.ids import MessageId, UpdateId
from telegram_types.models import ChatMemberStatus, Message
from telegram_types.update import (
    CallbackQueryContent,
    EditedMessageContent,
    InlineQueryContent,
    MessageContent,
    MyChatMemberContent,
    PollContent,
    UnknownContent,
    Update,
    UpdateType,
    known_updates,
    next_offset,
)


USER = {"id": 42, "is_bot": False, "first_name": "Ada"}
CHAT = {"id": 42, "type": "private", "first_name": "Ada"}
MESSAGE = {"message_id": 100, "date": 1609459200, "chat": CHAT, "from": USER, "text": "hello"}
POLL = {
    "id": "p1",
    "question": "?",
    "options": [{"text": "yes", "voter_count": 1}],
    "total_voter_count": 1,
    "is_closed": False,
    "is_anonymous": True,
    "type": "regular",
    "allows_multiple_answers": False,
}


# ── Content dispatch ─────────────────────────────────────────────────────────


class TestUpdateContent:
    """The populated field name selects the content variant."""

    def test_message(self) -> None:
        update = Update.model_validate({"update_id": 10, "message": MESSAGE})
        assert update.update_id == UpdateId(10)
        assert isinstance(update.content, MessageContent)
        assert update.kind is UpdateType.MESSAGE
        assert isinstance(update.content.payload, Message)
        assert update.content.message.message_id == MessageId(100)
        assert update.content.message.from_field.first_name == "Ada"

    def test_edited_message(self) -> None:
        update = Update.model_validate({"update_id": 11, "edited_message": MESSAGE})
        assert isinstance(update.content, EditedMessageContent)

    def test_my_chat_member(self) -> None:
        raw = {
            "update_id": 12,
            "my_chat_member": {
                "chat": CHAT,
                "from": USER,
                "date": 1,
                "old_chat_member": {"user": USER, "status": "left"},
                "new_chat_member": {"user": USER, "status": "member"},
            },
        }
        update = Update.model_validate(raw)
        assert isinstance(update.content, MyChatMemberContent)
        assert update.content.my_chat_member.new_chat_member.status is ChatMemberStatus.MEMBER

    def test_callback_query(self) -> None:
        raw = {"update_id": 13, "callback_query": {"id": "1", "from": USER, "chat_instance": "ci"}}
        update = Update.model_validate(raw)
        assert isinstance(update.content, CallbackQueryContent)

    def test_inline_query(self) -> None:
        raw = {"update_id": 14, "inline_query": {"id": "q", "from": USER, "query": "cats", "offset": ""}}
        update = Update.model_validate(raw)
        assert isinstance(update.content, InlineQueryContent)
        assert update.content.payload.query == "cats"

    def test_poll(self) -> None:
        update = Update.model_validate({"update_id": 15, "poll": POLL})
        assert isinstance(update.content, PollContent)

    def test_null_field_is_not_present(self) -> None:
        update = Update.model_validate({"update_id": 16, "message": None, "poll": POLL})
        assert isinstance(update.content, PollContent)


# ── Unknown content ──────────────────────────────────────────────────────────


class TestUnknownContent:
    def test_no_content_field(self) -> None:
        update = Update.model_validate({"update_id": 20})
        assert isinstance(update.content, UnknownContent)
        assert update.is_unknown
        assert update.kind is None
        assert update.content.payload == {}

    def test_future_field_kept(self) -> None:
        raw = {"update_id": 21, "message_reaction": {"emoji": "x"}}
        update = Update.model_validate(raw)
        assert update.is_unknown
        assert update.content.payload == {"message_reaction": {"emoji": "x"}}
        assert update.to_dict() == raw


# ── Failure modes ────────────────────────────────────────────────────────────


class TestUpdateFailures:
    def test_missing_update_id(self) -> None:
        with pytest.raises(ValidationError):
            Update.model_validate({"message": MESSAGE})

    def test_bad_payload_fails_whole_update(self) -> None:
        with pytest.raises(ValidationError):
            Update.model_validate({"update_id": 30, "message": {"text": "no ids"}})

    def test_update_id_past_64_bits(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Update.model_validate_json('{"update_id": 18446744073709551616}')
        assert exc_info.value.errors()[0]["type"] == "identifier_range"

    def test_several_fields_first_wins_and_warns(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="telegram_types"):
            update = Update.model_validate(
                {"update_id": 31, "edited_message": MESSAGE, "message": MESSAGE}
            )
        assert isinstance(update.content, MessageContent)
        assert any("several content fields" in record.getMessage() for record in caplog.records)


# ── Wire form ────────────────────────────────────────────────────────────────


class TestUpdateWireForm:
    def test_flat_round_trip(self) -> None:
        raw = {"update_id": 40, "message": MESSAGE}
        update = Update.model_validate(raw)
        data = update.to_dict()
        assert data["update_id"] == 40
        assert data["message"]["text"] == "hello"
        assert "content" not in data
        assert Update.model_validate(data) == update

    def test_json_round_trip(self) -> None:
        update = Update.model_validate({"update_id": 41, "poll": POLL})
        assert Update.model_validate_json(update.to_json()) == update

    def test_keyword_construction(self) -> None:
        message = Message.model_validate(MESSAGE)
        update = Update(update_id=UpdateId(42), content=MessageContent(message=message))
        assert update.to_dict()["message"]["message_id"] == 100

    def test_wire_key_named_content_is_still_nested(self) -> None:
        update = Update.model_validate({"update_id": 50, "content": {"a": 1}, "message": MESSAGE})
        assert isinstance(update.content, MessageContent)
        assert update.content.message.text == "hello"

    def test_lone_wire_key_named_content_is_unknown(self) -> None:
        raw = {"update_id": 51, "content": {"a": 1}}
        update = Update.model_validate(raw)
        assert update.is_unknown
        assert update.content.payload == {"content": {"a": 1}}
        assert update.to_dict() == raw


# ── Cursor ───────────────────────────────────────────────────────────────────


class TestNextOffset:
    def test_last_plus_one(self) -> None:
        updates = [
            Update.model_validate({"update_id": 5, "message": MESSAGE}),
            Update.model_validate({"update_id": 6}),
        ]
        assert next_offset(updates) == UpdateId(7)

    def test_empty_keeps_current(self) -> None:
        assert next_offset([]) is None
        assert next_offset([], UpdateId(9)) == UpdateId(9)

    def test_known_updates_skips_unknown(self) -> None:
        updates = [
            Update.model_validate({"update_id": 5, "message": MESSAGE}),
            Update.model_validate({"update_id": 6}),
        ]
        assert [u.update_id for u in known_updates(updates)] == [UpdateId(5)]


class TestUpdateType:
    def test_values_are_wire_names(self) -> None:
        assert UpdateType.CHAT_JOIN_REQUEST.value == "chat_join_request"
        assert UpdateType("message") is UpdateType.MESSAGE
