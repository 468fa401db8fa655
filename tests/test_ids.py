"""Tests for the identifier wrappers in telegram_types.ids."""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import TypeAdapter, ValidationError

from telegram_types.ids import INT64_MAX, INT64_MIN, ChatId, FileId, MessageId, ResultId, UpdateId, UserId
from telegram_types.models import User


# ── Equality and ordering ────────────────────────────────────────────────────


class TestIdentity:
    def test_same_kind_equal(self) -> None:
        assert UserId(5) == UserId(5)
        assert hash(UserId(5)) == hash(UserId(5))
        assert len({UserId(5), UserId(5), UserId(6)}) == 2

    def test_different_kinds_never_equal(self) -> None:
        assert UserId(5) != ChatId(5)
        assert FileId("a") != ResultId("a")

    def test_not_equal_to_raw_scalar(self) -> None:
        assert UserId(5) != 5

    def test_ordering_within_kind(self) -> None:
        assert sorted([MessageId(3), MessageId(1), MessageId(2)]) == [MessageId(1), MessageId(2), MessageId(3)]

    def test_ordering_across_kinds_raises(self) -> None:
        with pytest.raises(TypeError):
            UserId(1) < ChatId(2)

    def test_repr_and_str(self) -> None:
        assert repr(UserId(5)) == "UserId(5)"
        assert str(FileId("abc")) == "abc"

    def test_immutable(self) -> None:
        uid = UserId(5)
        with pytest.raises(AttributeError):
            uid.value = 6


# ── Arithmetic ───────────────────────────────────────────────────────────────


class TestArithmetic:
    def test_add(self) -> None:
        assert UpdateId(5) + 1 == UpdateId(6)
        assert isinstance(UpdateId(5) + 1, UpdateId)

    def test_sub(self) -> None:
        assert MessageId(10) - 3 == MessageId(7)

    def test_add_identifier_rejected(self) -> None:
        with pytest.raises(TypeError):
            UpdateId(5) + UpdateId(1)

    def test_add_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            UpdateId(5) + True

    def test_add_past_upper_bound_overflows(self) -> None:
        with pytest.raises(OverflowError):
            UpdateId(INT64_MAX) + 1

    def test_sub_past_lower_bound_overflows(self) -> None:
        with pytest.raises(OverflowError):
            UpdateId(INT64_MIN) - 1

    def test_int(self) -> None:
        assert int(ChatId(-100)) == -100


# ── Construction ─────────────────────────────────────────────────────────────


class TestConstruction:
    def test_integer_id_rejects_string(self) -> None:
        with pytest.raises(TypeError):
            UserId("5")

    def test_integer_id_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            UserId(True)

    def test_string_id_rejects_int(self) -> None:
        with pytest.raises(TypeError):
            FileId(42)

    def test_integer_id_accepts_both_bounds(self) -> None:
        assert UpdateId(INT64_MAX).value == 2**63 - 1
        assert UpdateId(INT64_MIN).value == -(2**63)

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 2**64])
    def test_integer_id_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(OverflowError):
            ChatId(value)


# ── Wire codec ───────────────────────────────────────────────────────────────


class TestWireCodec:
    def test_encodes_as_bare_scalar(self) -> None:
        assert TypeAdapter(UserId).dump_json(UserId(7)) == b"7"
        assert TypeAdapter(FileId).dump_json(FileId("abc")) == b'"abc"'

    def test_decodes_from_scalar(self) -> None:
        assert TypeAdapter(ChatId).validate_json("-100") == ChatId(-100)
        assert TypeAdapter(FileId).validate_json('"abc"') == FileId("abc")

    def test_numeric_string_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            User.model_validate({"id": "5", "is_bot": False, "first_name": "A"})
        assert "UserId must be a JSON integer, got string" in str(exc_info.value)

    def test_boolean_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TypeAdapter(UpdateId).validate_json("true")
        assert exc_info.value.errors()[0]["type"] == "identifier_type"

    def test_string_id_rejects_number(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(FileId).validate_json("42")

    @pytest.mark.parametrize("raw", [str(2**63), str(-(2**63) - 1), "18446744073709551616"])
    def test_out_of_range_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TypeAdapter(UserId).validate_json(raw)
        error = exc_info.value.errors()[0]
        assert error["type"] == "identifier_range"
        assert "UserId must fit in a signed 64-bit integer" in error["msg"]

    def test_bounds_decode(self) -> None:
        assert TypeAdapter(UpdateId).validate_json(str(INT64_MAX)) == UpdateId(INT64_MAX)
        assert TypeAdapter(UpdateId).validate_json(str(INT64_MIN)) == UpdateId(INT64_MIN)

    def test_wrong_kind_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TypeAdapter(ChatId).validate_python(UserId(1))
        error = exc_info.value.errors()[0]
        assert error["type"] == "identifier_kind"
        assert "expected ChatId, got UserId" in error["msg"]

    def test_same_kind_passes_through(self) -> None:
        uid = UserId(1)
        assert TypeAdapter(UserId).validate_python(uid) is uid
