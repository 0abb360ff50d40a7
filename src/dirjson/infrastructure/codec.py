"""JSON codec with fixed, non-overridable conventions.

- Dates and datetimes are ISO-8601 strings (``Z`` for UTC).
- Non-finite floats are the JSON strings ``"+Infinity"``, ``"-Infinity"``
  and ``"NaN"``, never bare tokens or ``null``. Float-typed targets
  accept those strings back; string-typed targets keep them verbatim.

Validation and dumping are done by pydantic, so any type pydantic can
build a schema for is supported: builtins, containers, dataclasses,
``TypedDict``, ``BaseModel`` subclasses, enums, ``datetime``...
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import PydanticUserError, TypeAdapter, ValidationError

from dirjson.domain.errors import CodecError

T = TypeVar("T")

POSITIVE_INFINITY = "+Infinity"
NEGATIVE_INFINITY = "-Infinity"
NAN = "NaN"

_CODEC_FAILURES = (
    PydanticUserError,
    pydantic_core.PydanticSerializationError,
    ValidationError,
    ValueError,
    TypeError,
    UnicodeDecodeError,
    RecursionError,
)


def type_name(tp: Any) -> str:
    """Readable name of a type or type expression for error messages."""
    return getattr(tp, "__qualname__", None) or repr(tp)


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _get_adapter(tp: Any) -> TypeAdapter[Any]:
    try:
        hash(tp)
    except TypeError:
        # Unhashable type expressions skip the cache.
        return TypeAdapter(tp)
    return _adapter(tp)


def encode_non_finite(obj: Any) -> Any:
    """Replace non-finite floats in *obj* with their sentinel strings."""
    if isinstance(obj, float):
        if math.isnan(obj):
            return NAN
        if math.isinf(obj):
            return POSITIVE_INFINITY if obj > 0 else NEGATIVE_INFINITY
        return obj
    if isinstance(obj, dict):
        return {key: encode_non_finite(val) for key, val in obj.items()}
    if isinstance(obj, list | tuple | set | frozenset):
        return [encode_non_finite(item) for item in obj]
    return obj


def serialize(value: Any, *, as_type: Any = None) -> bytes:
    """Encode *value* as UTF-8 JSON bytes.

    Args:
        value: The value to encode.
        as_type: Type to serialize *value* as. Defaults to ``type(value)``.

    Raises:
        CodecError: The type is unsupported or the value cannot be dumped.
    """
    tp = type(value) if as_type is None else as_type
    try:
        dumped = _get_adapter(tp).dump_python(value, mode="python")
        return pydantic_core.to_json(encode_non_finite(dumped))
    except _CODEC_FAILURES as exc:
        raise CodecError("serialize", type_name(tp), exc) from exc


def deserialize(data: bytes, target: type[T]) -> T:
    """Decode UTF-8 JSON *data* into an instance of *target*.

    Raises:
        CodecError: Malformed JSON, or the data does not fit *target*.
    """
    try:
        return _get_adapter(target).validate_json(data)
    except _CODEC_FAILURES as exc:
        raise CodecError("deserialize", type_name(target), exc) from exc
