"""The two ``$oid`` encodings of an object identifier.

``ExtendedJsonEncoding`` follows MongoDB extended JSON and wraps the hex string
in a single-key map. ``ScalarMarkerEncoding`` is used where only a bare string
can travel (query scalars, path params) and prefixes the hex with ``$oid:``.
The two must not be mixed: a ``{"$oid": ...}`` map is never produced by the
marker encoding and a ``"$oid:..."`` string is never produced by extended JSON.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import Settings, get_settings
from .models.exceptions import IntegerOverflowError, InvalidObjectIdError
from .models.identifiers import INT32_MAX, INT32_MIN, Identifier, IdentifierKind

LOGGER = logging.getLogger(__name__)

ExtendedJsonValue = Union[dict, str, int]


class ExtendedJsonEncoding:
    """Structured output: ``{"$oid": hex}`` / bare string / bare number."""

    KEY = "$oid"

    @classmethod
    def encode(cls, identifier: Identifier) -> ExtendedJsonValue:
        if identifier.kind is IdentifierKind.OBJECT_ID:
            return {cls.KEY: str(identifier)}
        return identifier.value  # type: ignore[return-value]


class ScalarMarkerEncoding:
    """Plain-string channel: ``$oid:<hex>`` marks an object identifier."""

    PREFIX = "$oid:"

    @classmethod
    def encode_text(cls, identifier: Identifier) -> str:
        if identifier.kind is IdentifierKind.OBJECT_ID:
            return f"{cls.PREFIX}{identifier}"
        return str(identifier)

    @classmethod
    def encode(
        cls,
        identifier: Identifier,
        *,
        settings: Optional[Settings] = None,
    ) -> Union[str, int]:
        """Render ``identifier`` as a query scalar: a string, or a 32-bit number."""

        if identifier.kind is not IdentifierKind.INTEGER:
            return cls.encode_text(identifier)
        value: int = identifier.value  # type: ignore[assignment]
        if INT32_MIN <= value <= INT32_MAX:
            return value
        policy = (settings or get_settings()).scalar_int_overflow
        if policy == "clamp":
            clamped = max(INT32_MIN, min(INT32_MAX, value))
            LOGGER.debug("Clamped integer identifier %s to %s for scalar output", value, clamped)
            return clamped
        raise IntegerOverflowError(f"Integer identifier {value} does not fit a 32-bit scalar")

    @classmethod
    def decode(cls, text: str) -> Identifier:
        """Read a plain string, recovering an ObjectId when the marker is present.

        A marker followed by anything other than 24 hex characters is kept as
        text, marker included.
        """

        if not text.startswith(cls.PREFIX):
            return Identifier.from_text(text)
        try:
            return Identifier.parse_object_id(text[len(cls.PREFIX):])
        except InvalidObjectIdError:
            LOGGER.debug("Marker without valid ObjectId hex, keeping %r as text", text)
            return Identifier.from_text(text)


__all__ = ["ExtendedJsonEncoding", "ExtendedJsonValue", "ScalarMarkerEncoding"]
