from __future__ import annotations

import pickle

import bson
import pytest
from bson import ObjectId
from bson.errors import InvalidId
from bson.int64 import Int64

from polyid import (
    Identifier,
    IdentifierKind,
    IntegerOverflowError,
    InvalidObjectIdError,
    UnsupportedBsonTypeError,
)

OID_HEX = "507f1f77bcf86cd799439011"


def test_constructors_set_kind_and_value() -> None:
    oid = ObjectId(OID_HEX)

    assert Identifier.from_object_id(oid).kind is IdentifierKind.OBJECT_ID
    assert Identifier.from_object_id(oid).value == oid
    assert Identifier.from_text("abc").kind is IdentifierKind.TEXT
    assert Identifier.from_int(-3).kind is IdentifierKind.INTEGER
    assert Identifier.from_int(-3).value == -3


def test_from_text_never_recovers_object_id() -> None:
    ident = Identifier.from_text(f"$oid:{OID_HEX}")
    assert ident.kind is IdentifierKind.TEXT
    assert str(ident) == f"$oid:{OID_HEX}"


def test_parse_object_id_success_and_failure() -> None:
    assert Identifier.parse_object_id(OID_HEX) == Identifier.from_object_id(ObjectId(OID_HEX))

    with pytest.raises(InvalidObjectIdError):
        Identifier.parse_object_id("not-hex")
    with pytest.raises(InvalidObjectIdError):
        Identifier.parse_object_id(OID_HEX[:-1])
    with pytest.raises(InvalidObjectIdError):
        Identifier.parse_object_id(None)  # type: ignore[arg-type]


def test_oid_literal_helper() -> None:
    assert Identifier.oid(OID_HEX).is_object_id
    with pytest.raises(InvalidId):
        Identifier.oid("zz")


def test_from_int_rejects_out_of_range_and_bool() -> None:
    with pytest.raises(IntegerOverflowError):
        Identifier.from_int(2**63)
    with pytest.raises(TypeError):
        Identifier.from_int(True)


def test_equality_is_kind_sensitive() -> None:
    assert Identifier.from_int(7) != Identifier.from_text("7")
    assert Identifier.from_int(7) != Identifier.oid(OID_HEX)
    assert Identifier.from_text(OID_HEX) != Identifier.oid(OID_HEX)
    assert Identifier.from_int(7) == Identifier.from_int(Int64(7))
    assert len({Identifier.from_int(7), Identifier.from_text("7"), Identifier.from_int(7)}) == 2


def test_identifiers_are_immutable() -> None:
    ident = Identifier.from_text("abc")
    with pytest.raises(AttributeError):
        ident._value = "other"  # type: ignore[misc]
    assert pickle.loads(pickle.dumps(ident)) == ident


def test_canonical_string() -> None:
    assert str(Identifier.oid(OID_HEX)) == OID_HEX
    assert str(Identifier.oid(OID_HEX.upper())) == OID_HEX
    assert str(Identifier.from_text("hello")) == "hello"
    assert str(Identifier.from_int(-42)) == "-42"
    assert repr(Identifier.from_text("x")) == "Identifier(TEXT, 'x')"


def test_to_object_id() -> None:
    oid = ObjectId(OID_HEX)
    assert Identifier.from_object_id(oid).to_object_id() is oid
    assert Identifier.from_text(OID_HEX).to_object_id() == oid

    with pytest.raises(InvalidObjectIdError):
        Identifier.from_text("hello").to_object_id()
    with pytest.raises(InvalidObjectIdError):
        Identifier.from_int(42).to_object_id()


def test_object_id_round_trip() -> None:
    oid = ObjectId()
    assert Identifier.from_object_id(oid).to_object_id() == oid


def test_to_bson_values() -> None:
    assert Identifier.oid(OID_HEX).to_bson() == ObjectId(OID_HEX)
    assert Identifier.from_text("abc").to_bson() == "abc"
    encoded = Identifier.from_int(5).to_bson()
    assert isinstance(encoded, Int64)
    assert encoded == 5


@pytest.mark.parametrize(
    "ident",
    [
        Identifier.oid(OID_HEX),
        Identifier.from_text("opaque-key"),
        Identifier.from_int(-(2**63)),
        Identifier.from_int(2**40),
    ],
)
def test_bson_round_trip(ident: Identifier) -> None:
    raw = bson.encode({"_id": ident.to_bson()})
    assert Identifier.from_bson(bson.decode(raw)["_id"]) == ident


@pytest.mark.parametrize("value", [1.5, True, None, [1], {"a": 1}, b"\x00" * 12])
def test_from_bson_rejects_other_types(value) -> None:
    with pytest.raises(UnsupportedBsonTypeError):
        Identifier.from_bson(value)


@pytest.mark.parametrize(
    "text",
    [
        "507f1f77 bcf86cd7 994390",
        "507f1f77\tbcf86cd799439011"[:24],
        " 507f1f77bcf86cd79943901",
        "507f1f77bcf86cd79943901\n",
        "507f1f77bcf86cd79943901g",
        "0x507f1f77bcf86cd7994390",
    ],
)
def test_hex_must_be_exactly_24_hex_digits(text: str) -> None:
    assert len(text) == 24
    with pytest.raises(InvalidObjectIdError):
        Identifier.parse_object_id(text)
    with pytest.raises(InvalidObjectIdError):
        Identifier.from_text(text).to_object_id()
    with pytest.raises(InvalidId):
        Identifier.oid(text)


def test_from_bson_accepts_int32_values() -> None:
    decoded = bson.decode(bson.encode({"_id": 5}))["_id"]
    assert not isinstance(decoded, Int64)
    assert Identifier.from_bson(decoded) == Identifier.from_int(5)


def test_from_bson_decodes_int64_as_integer() -> None:
    decoded = bson.decode(bson.encode({"_id": Int64(5)}))["_id"]
    assert isinstance(decoded, Int64)
    assert Identifier.from_bson(decoded) == Identifier.from_int(5)
