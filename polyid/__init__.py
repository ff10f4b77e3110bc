"""Polymorphic record identifiers: ObjectId, string or 64-bit integer."""

from .config import Settings, get_settings
from .decoding import InputShape, decode_identifier
from .encodings import ExtendedJsonEncoding, ScalarMarkerEncoding
from .models import (
    Identifier,
    IdentifierError,
    IdentifierKind,
    IntegerOverflowError,
    InvalidObjectIdError,
    UnexpectedInputShapeError,
    UnexpectedTokenError,
    UnsupportedBsonTypeError,
)
from .models.fields import PyIdentifier

__all__ = [
    "ExtendedJsonEncoding",
    "Identifier",
    "IdentifierError",
    "IdentifierKind",
    "InputShape",
    "IntegerOverflowError",
    "InvalidObjectIdError",
    "PyIdentifier",
    "ScalarMarkerEncoding",
    "Settings",
    "UnexpectedInputShapeError",
    "UnexpectedTokenError",
    "UnsupportedBsonTypeError",
    "decode_identifier",
    "get_settings",
]
