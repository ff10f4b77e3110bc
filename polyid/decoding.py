"""Decoding identifiers from generic structured input.

The caller's serializer has already parsed the payload into plain Python
values; ``classify_input`` reduces such a value to one of four shapes and
``decode_shape`` switches on that shape.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from bson import json_util
from bson.errors import InvalidId

from .config import Settings, get_settings
from .encodings import ExtendedJsonEncoding, ScalarMarkerEncoding
from .models.exceptions import (
    IntegerOverflowError,
    InvalidObjectIdError,
    UnexpectedInputShapeError,
)
from .models.identifiers import INT64_MAX, INT64_MIN, OBJECT_ID_HEX, UINT64_MAX, Identifier

LOGGER = logging.getLogger(__name__)

# Extended JSON operators whose payload json_util passes through unchecked
_STRING_OPERATORS = (ExtendedJsonEncoding.KEY, "$symbol")


class InputShape(str, Enum):
    MAP = "map"
    STRING = "string"
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"


def classify_input(value: Any) -> InputShape:
    if isinstance(value, Mapping):
        return InputShape.MAP
    if isinstance(value, str):
        return InputShape.STRING
    if isinstance(value, int) and not isinstance(value, bool):
        if INT64_MIN <= value <= INT64_MAX:
            return InputShape.SIGNED_INT
        if INT64_MAX < value <= UINT64_MAX:
            return InputShape.UNSIGNED_INT
        raise UnexpectedInputShapeError(f"Integer {value} does not fit in 64 bits")
    raise UnexpectedInputShapeError(
        f"Unable to parse ID from {type(value).__name__}: expected a map, string or integer"
    )


def _decode_map(value: Mapping) -> Identifier:
    document = dict(value)
    for key in _STRING_OPERATORS:
        if key in document and not isinstance(document[key], str):
            raise UnexpectedInputShapeError(
                f"{key} must hold a string, got {type(document[key]).__name__}"
            )
    oid = document.get(ExtendedJsonEncoding.KEY)
    if oid is not None and OBJECT_ID_HEX.fullmatch(oid) is None:
        raise InvalidObjectIdError(f"Invalid ObjectId hex string: {oid!r}")
    try:
        bson_value = json_util.object_hook(document)
    except InvalidId as exc:
        raise InvalidObjectIdError(f"Invalid ObjectId hex string: {oid!r}") from exc
    except Exception as exc:
        raise UnexpectedInputShapeError(f"Malformed extended JSON id: {exc}") from exc
    return Identifier.from_bson(bson_value)


def _decode_unsigned(value: int, settings: Settings) -> Identifier:
    if settings.unsigned_overflow == "wrap":
        wrapped = value - (UINT64_MAX + 1)
        LOGGER.debug("Wrapped unsigned id %s to %s", value, wrapped)
        return Identifier.from_int(wrapped)
    raise IntegerOverflowError(f"Unsigned id {value} exceeds the signed 64-bit range")


def decode_shape(
    shape: InputShape,
    value: Any,
    *,
    settings: Optional[Settings] = None,
) -> Identifier:
    if shape is InputShape.MAP:
        return _decode_map(value)
    if shape is InputShape.STRING:
        return ScalarMarkerEncoding.decode(value)
    if shape is InputShape.SIGNED_INT:
        return Identifier.from_int(value)
    return _decode_unsigned(value, settings or get_settings())


def decode_identifier(value: Any, *, settings: Optional[Settings] = None) -> Identifier:
    """Decode a map, string or integer into an :class:`Identifier`.

    Maps are read as extended JSON (``{"$oid": hex}``, ``{"$numberLong": "5"}``)
    and then decoded like BSON values. Strings go through ``$oid:`` marker
    disambiguation. Integers above the signed 64-bit range follow
    ``Settings.unsigned_overflow``.
    """

    return decode_shape(classify_input(value), value, settings=settings)


__all__ = ["InputShape", "classify_input", "decode_identifier", "decode_shape"]
