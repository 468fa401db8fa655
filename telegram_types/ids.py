"""Strongly-typed identifiers.

Each identifier wraps one scalar and travels on the wire as that bare scalar.
Two kinds never compare equal even when their values coincide, and a field
typed ``ChatId`` refuses a ``UserId``.  Integer identifiers support ``+`` and
``-`` with a plain ``int`` so update cursors can be advanced::

    >>> UpdateId(5) + 1
    UpdateId(6)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from telegram_types.codec import json_type_name


def _dump_scalar(identifier: Any) -> Any:
    return getattr(identifier, "value", identifier)


@dataclass(frozen=True, order=True, repr=False)
class Scalar:
    """Frozen single-value wrapper that pydantic encodes as the bare value.

    Subclasses set ``_scalar_types`` / ``_scalar_name`` and may narrow
    :meth:`_accepts`.
    """

    value: Any

    _scalar_types: ClassVar[Tuple[type, ...]] = ()
    _scalar_name: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not self._accepts(self.value):
            raise TypeError(
                f"{type(self).__name__} expects a {self._scalar_name}, got {type(self.value).__name__}"
            )

    @classmethod
    def _accepts(cls, value: Any) -> bool:
        return isinstance(value, cls._scalar_types) and not isinstance(value, bool)

    @classmethod
    def _validate(cls, value: Any) -> "Scalar":
        if isinstance(value, cls):
            return value
        if isinstance(value, Scalar):
            raise PydanticCustomError(
                "identifier_kind",
                "expected {expected}, got {actual}",
                {"expected": cls.__name__, "actual": type(value).__name__},
            )
        if not cls._accepts(value):
            raise PydanticCustomError(
                "identifier_type",
                "{kind} must be a JSON {scalar}, got {json_type}",
                {"kind": cls.__name__, "scalar": cls._scalar_name, "json_type": json_type_name(value)},
            )
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(_dump_scalar),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class IntegerId(Scalar):
    """Identifier over a signed 64-bit integer.

    Values outside ``[-2**63, 2**63)`` are rejected on construction
    (``OverflowError``), on decode (``identifier_range``) and by arithmetic.
    """

    _scalar_types = (int,)
    _scalar_name = "integer"

    def __post_init__(self) -> None:
        if _is_plain_int(self.value) and not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{type(self).__name__} out of 64-bit range: {self.value}")
        super().__post_init__()

    @classmethod
    def _validate(cls, value: Any) -> "IntegerId":
        if _is_plain_int(value) and not INT64_MIN <= value <= INT64_MAX:
            raise PydanticCustomError(
                "identifier_range",
                "{kind} must fit in a signed 64-bit integer, got {value}",
                {"kind": cls.__name__, "value": value},
            )
        return super()._validate(value)

    def __add__(self, other: Any) -> "IntegerId":
        if not _is_plain_int(other):
            return NotImplemented
        return type(self)(self.value + other)

    def __sub__(self, other: Any) -> "IntegerId":
        if not _is_plain_int(other):
            return NotImplemented
        return type(self)(self.value - other)

    def __int__(self) -> int:
        return self.value


class StringId(Scalar):
    """Identifier over an opaque string."""

    _scalar_types = (str,)
    _scalar_name = "string"


class UserId(IntegerId):
    """Unique identifier of a user or bot."""


class ChatId(IntegerId):
    """Unique identifier of a chat; negative for groups and channels."""


class MessageId(IntegerId):
    """Message identifier, unique inside one chat."""


class UpdateId(IntegerId):
    """Update identifier, increasing sequentially per bot."""


class FileId(StringId):
    """Identifier of a file stored on Telegram's servers.

    It is unique per bot and cannot be reused by another bot; resending by
    file id keeps the original file type.
    """


class ResultId(StringId):
    """Identifier of one inline query result, chosen by the bot."""


class InlineQueryId(StringId):
    """Identifier of an incoming inline query."""
