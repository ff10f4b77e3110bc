"""The polymorphic record identifier shared across models."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Union

from bson import ObjectId
from bson.errors import InvalidId
from bson.int64 import Int64

from .exceptions import IntegerOverflowError, InvalidObjectIdError, UnsupportedBsonTypeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

OBJECT_ID_HEX = re.compile(r"[0-9a-fA-F]{24}")

IdentifierValue = Union[ObjectId, str, int]


class IdentifierKind(str, Enum):
    OBJECT_ID = "object_id"
    TEXT = "text"
    INTEGER = "integer"


def _check_int64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Integer identifier requires an int, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerOverflowError(f"Integer identifier {value} is outside the signed 64-bit range")
    return int(value)


def _parse_hex(text: str) -> ObjectId:
    # ObjectId(None) mints a fresh id
    if not isinstance(text, str):
        raise InvalidObjectIdError(f"ObjectId hex must be a str, got {type(text).__name__}")
    # bytes.fromhex skips whitespace, so ObjectId alone accepts short ids
    if OBJECT_ID_HEX.fullmatch(text) is None:
        raise InvalidObjectIdError(f"Invalid ObjectId hex string: {text!r}")
    try:
        return ObjectId(text)
    except InvalidId as exc:  # pragma: no cover - guarded by the pattern
        raise InvalidObjectIdError(f"Invalid ObjectId hex string: {text!r}") from exc


class Identifier:
    """A record id that is exactly one of an ObjectId, a string or a 64-bit integer.

    Instances are immutable. Two identifiers are equal only when both the kind
    and the payload match, so ``Identifier.from_int(7)`` never equals
    ``Identifier.from_text("7")``.
    """

    __slots__ = ("_kind", "_value")

    def __init__(self, kind: IdentifierKind, value: IdentifierValue) -> None:
        kind = IdentifierKind(kind)
        if kind is IdentifierKind.OBJECT_ID:
            if not isinstance(value, ObjectId):
                raise TypeError("ObjectId identifier requires an ObjectId instance")
        elif kind is IdentifierKind.TEXT:
            if not isinstance(value, str):
                raise TypeError("Text identifier requires a str")
            value = str(value)
        else:
            value = _check_int64(value)  # type: ignore[arg-type]
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    # construction

    @classmethod
    def from_text(cls, value: str) -> "Identifier":
        """Wrap ``value`` as a text identifier. No ``$oid:`` detection happens here."""

        return cls(IdentifierKind.TEXT, value)

    @classmethod
    def from_int(cls, value: int) -> "Identifier":
        return cls(IdentifierKind.INTEGER, value)

    @classmethod
    def from_object_id(cls, value: ObjectId) -> "Identifier":
        return cls(IdentifierKind.OBJECT_ID, value)

    @classmethod
    def parse_object_id(cls, text: str) -> "Identifier":
        """Parse a 24 character hex string into an ObjectId identifier.

        Raises :class:`InvalidObjectIdError` instead of falling back to text.
        """

        return cls(IdentifierKind.OBJECT_ID, _parse_hex(text))

    @classmethod
    def oid(cls, text: str) -> "Identifier":
        """Build an ObjectId identifier from a hex literal known to be valid.

        Meant for constants and fixtures; bad input raises bson's ``InvalidId``.
        """

        if not isinstance(text, str) or OBJECT_ID_HEX.fullmatch(text) is None:
            raise InvalidId(f"{text!r} is not a valid ObjectId, it must be a 24-character hex string")
        return cls(IdentifierKind.OBJECT_ID, ObjectId(text))

    @classmethod
    def from_bson(cls, value: Any) -> "Identifier":
        """Map a decoded BSON value onto the matching identifier kind."""

        if isinstance(value, ObjectId):
            return cls.from_object_id(value)
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        raise UnsupportedBsonTypeError(f"Invalid id type used: {type(value).__name__} ({value!r})")

    # accessors

    @property
    def kind(self) -> IdentifierKind:
        return self._kind

    @property
    def value(self) -> IdentifierValue:
        return self._value

    @property
    def is_object_id(self) -> bool:
        return self._kind is IdentifierKind.OBJECT_ID

    # conversion

    def to_bson(self) -> Union[ObjectId, str, Int64]:
        if self._kind is IdentifierKind.INTEGER:
            return Int64(self._value)
        return self._value

    def to_object_id(self) -> ObjectId:
        """Return the ObjectId this identifier holds or spells out in hex."""

        if self._kind is IdentifierKind.OBJECT_ID:
            return self._value  # type: ignore[return-value]
        return _parse_hex(str(self))

    def __str__(self) -> str:
        if self._kind is IdentifierKind.TEXT:
            return self._value  # type: ignore[return-value]
        return str(self._value)

    def __repr__(self) -> str:
        return f"Identifier({self._kind.name}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Identifier is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Identifier is immutable")

    def __reduce__(self):
        return (self.__class__, (self._kind, self._value))


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "OBJECT_ID_HEX",
    "UINT64_MAX",
    "Identifier",
    "IdentifierKind",
    "IdentifierValue",
]
