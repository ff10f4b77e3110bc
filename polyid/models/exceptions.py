"""Exceptions raised while building, decoding or converting identifiers."""

from __future__ import annotations


class IdentifierError(ValueError):
    """Base exception for every identifier decode or conversion failure."""


class UnsupportedBsonTypeError(IdentifierError):
    """Raised when a BSON value is not an ObjectId, a string or a 64-bit integer."""


class UnexpectedInputShapeError(IdentifierError):
    """Raised when structured input is not a map, a string or an integer."""


class InvalidObjectIdError(IdentifierError):
    """Raised when a value cannot be parsed as a 24 character hex ObjectId."""


class IntegerOverflowError(IdentifierError):
    """Raised when an integer does not fit the target range."""


class UnexpectedTokenError(IdentifierError):
    """Raised when a query scalar receives a token kind it cannot represent."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unexpected token: {kind}")
        self.kind = kind


__all__ = [
    "IdentifierError",
    "IntegerOverflowError",
    "InvalidObjectIdError",
    "UnexpectedInputShapeError",
    "UnexpectedTokenError",
    "UnsupportedBsonTypeError",
]
