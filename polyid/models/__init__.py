from .exceptions import (
    IdentifierError,
    IntegerOverflowError,
    InvalidObjectIdError,
    UnexpectedInputShapeError,
    UnexpectedTokenError,
    UnsupportedBsonTypeError,
)
from .identifiers import Identifier, IdentifierKind

__all__ = [
    "Identifier",
    "IdentifierError",
    "IdentifierKind",
    "IntegerOverflowError",
    "InvalidObjectIdError",
    "UnexpectedInputShapeError",
    "UnexpectedTokenError",
    "UnsupportedBsonTypeError",
]
