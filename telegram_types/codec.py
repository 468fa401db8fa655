"""Wire codec helpers shared by every model module.

Pydantic already covers plain objects.  The helpers here cover the three
union shapes the Bot API uses that need an explicit decision:

* :func:`untagged_union`: no discriminator; variants are tried in a fixed
  priority order and the first structural match wins.
* :func:`tagged_by`: an explicit discriminator field; unrecognised values
  fall back to the ``unknown`` arm instead of failing.
* :func:`first_present`: a flat object where the populated field name *is*
  the discriminator (updates, inline keyboard button actions).
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Annotated, Any, Dict, Iterable, List, Sequence, Tuple, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    PlainSerializer,
    PlainValidator,
    SerializationInfo,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from core.logger import TelegramTypesLogger

logger = TelegramTypesLogger.get_logger()

UNKNOWN_TAG = "unknown"


class TelegramModel(BaseModel):
    """Base class for every Bot API object and request.

    Instances are immutable; use :meth:`model_copy` to derive a changed copy.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        """Encode to the wire form: aliases applied, absent optionals omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_dict(self) -> dict:
        """Like :meth:`to_json` but returns JSON-compatible Python objects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def json_type_name(value: Any) -> str:
    """Name the JSON type of an already-parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _runtime_class(variant: Any) -> type:
    """Strip ``Annotated`` metadata, leaving the class instances will have."""
    if get_origin(variant) is Annotated:
        return get_args(variant)[0]
    return variant


def _field(value: Any, name: str) -> Any:
    """Read *name* from raw wire data or from an already-built model."""
    if isinstance(value, dict):
        return value.get(name)
    return getattr(value, name, None)


# ── Untagged unions ──────────────────────────────────────────────────────────


class _UntaggedUnion:
    """Validator/serializer pair for one untagged union."""

    def __init__(self, name: str, variants: Tuple[Any, ...]) -> None:
        self.name = name
        self.variants = variants

    @functools.cached_property
    def _adapters(self) -> List[Tuple[type, TypeAdapter]]:
        # Built lazily: variants may reference models that are defined later.
        return [(_runtime_class(variant), TypeAdapter(variant)) for variant in self.variants]

    def validate(self, value: Any) -> Any:
        for _, adapter in self._adapters:
            try:
                return adapter.validate_python(value)
            except ValidationError:
                continue
        raise PydanticCustomError(
            "untagged_union_no_match",
            "no variant of {union} matches a JSON {json_type}",
            {"union": self.name, "json_type": json_type_name(value)},
        )

    def serialize(self, value: Any, info: SerializationInfo) -> Any:
        for runtime_class, adapter in self._adapters:
            if isinstance(value, runtime_class):
                return adapter.dump_python(
                    value,
                    mode=info.mode,
                    by_alias=info.by_alias,
                    exclude_none=info.exclude_none,
                )
        return value


def untagged_union(name: str, *variants: Any) -> Any:
    """Build an annotated union type decoded by trial in *variants* order.

    The wire form is exactly the chosen variant's own form.  Order matters:
    a variant must come before any other variant whose required fields are a
    subset of its own, otherwise the looser one would always win.
    """
    union = _UntaggedUnion(name, variants)
    return Annotated[
        Union[variants],
        PlainValidator(union.validate),
        PlainSerializer(union.serialize, return_type=Any),
    ]


# ── Tagged unions with an unknown arm ────────────────────────────────────────


def tagged_by(field: str, known: Iterable[str], union: str) -> Discriminator:
    """Discriminate on the value of *field*; anything unrecognised is ``unknown``.

    Pair with ``Tag`` annotations on each variant plus one variant tagged
    :data:`UNKNOWN_TAG`.
    """
    known_tags = frozenset(known)

    def _discriminate(value: Any) -> str:
        tag = _field(value, field)
        if isinstance(tag, str) and tag in known_tags:
            return tag
        if isinstance(value, dict):
            logger.debug("Unrecognised tag, decoding as unknown", extra={"union": union, "tag": tag})
        return UNKNOWN_TAG

    return Discriminator(_discriminate)


def first_present(fields: Sequence[str], union: str) -> Discriminator:
    """Discriminate on the first of *fields* holding a non-null value.

    *fields* is the priority order; when none is populated the ``unknown``
    arm is chosen.
    """
    priority = tuple(fields)

    def _discriminate(value: Any) -> str:
        for name in priority:
            if _field(value, name) is not None:
                return name
        if isinstance(value, dict):
            logger.debug("No known field present, decoding as unknown", extra={"union": union, "fields": sorted(value)})
        return UNKNOWN_TAG

    return Discriminator(_discriminate)


def present_fields(value: Any, fields: Sequence[str]) -> List[str]:
    """Return which of *fields* are populated in raw wire data, in order."""
    if not isinstance(value, dict):
        return []
    return [name for name in fields if value.get(name) is not None]


class UnknownFallbackEnum(str, Enum):
    """String enum whose unrecognised values decode to its ``UNKNOWN`` member.

    The raw string is not kept: ``UNKNOWN`` encodes as its own literal.
    Non-string input is still rejected.
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        logger.debug("Unrecognised enum value, decoding as unknown", extra={"union": cls.__name__, "tag": value})
        return cls.__members__["UNKNOWN"]


# ── Flattened sub-objects ────────────────────────────────────────────────────


def is_nested(data: Dict[str, Any], keep: Iterable[str], into: str) -> bool:
    """True for keyword input: a built model under *into*, other keys all in *keep*."""
    return isinstance(data.get(into), BaseModel) and set(data) <= set(keep) | {into}


def nest_fields(data: Any, keep: Iterable[str], into: str) -> Any:
    """Move every key of raw *data* not in *keep* under the key *into*.

    Used by models that expose part of a flat wire object as one typed
    field (``Chat.kind``, ``Update.content``).  Already-nested input and
    non-dict input pass through unchanged.  A wire key that happens to be
    named *into* is nested like any other key.
    """
    keep = frozenset(keep)
    if not isinstance(data, dict) or is_nested(data, keep, into):
        return data
    flat = {key: value for key, value in data.items() if key in keep}
    flat[into] = {key: value for key, value in data.items() if key not in keep}
    return flat


def flatten_field(data: Any, name: str) -> Any:
    """Inverse of :func:`nest_fields` for a serialized model dict."""
    if not isinstance(data, dict):
        return data
    nested = data.pop(name, None)
    if isinstance(nested, dict):
        data.update(nested)
    return data


def rebuild_models(namespace: dict) -> None:
    """Resolve forward references of every incomplete model in *namespace*."""
    for value in list(namespace.values()):
        if isinstance(value, type) and issubclass(value, BaseModel) and not value.__pydantic_complete__:
            value.model_rebuild()
