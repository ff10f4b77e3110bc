"""Pydantic field types for identifiers."""

from __future__ import annotations

from typing import Annotated, Any

from bson import ObjectId
from pydantic import SerializationInfo
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from ..decoding import decode_identifier
from ..encodings import ExtendedJsonEncoding
from .identifiers import Identifier


def _validate_identifier(value: Any) -> Identifier:
    if isinstance(value, Identifier):
        return value
    if isinstance(value, ObjectId):
        return Identifier.from_object_id(value)
    return decode_identifier(value)


def _serialize_identifier(value: Identifier, info: SerializationInfo) -> Any:
    # JSON output speaks extended JSON, python output hands BSON values to the driver
    if info.mode_is_json():
        return ExtendedJsonEncoding.encode(value)
    return value.to_bson()


PyIdentifier = Annotated[
    Identifier,
    BeforeValidator(_validate_identifier),
    PlainSerializer(_serialize_identifier),
]

__all__ = ["PyIdentifier"]
