"""GraphQL scalar for identifiers.

Requires the ``graphql`` extra (graphql-core). Nothing else in the package
imports this module.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from graphql import GraphQLScalarType, IntValueNode, StringValueNode, ValueNode

from .encodings import ScalarMarkerEncoding
from .models.exceptions import UnexpectedTokenError
from .models.identifiers import Identifier


def serialize_identifier(value: Any) -> Union[str, int]:
    if not isinstance(value, Identifier):
        raise TypeError(f"RecordID cannot represent non-identifier value: {value!r}")
    return ScalarMarkerEncoding.encode(value)


def parse_identifier_value(value: Any) -> Identifier:
    if isinstance(value, str):
        return ScalarMarkerEncoding.decode(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Identifier.from_int(value)
    raise UnexpectedTokenError(type(value).__name__)


def parse_identifier_literal(
    value_node: ValueNode,
    _variables: Optional[Dict[str, Any]] = None,
) -> Identifier:
    if isinstance(value_node, StringValueNode):
        return ScalarMarkerEncoding.decode(value_node.value)
    if isinstance(value_node, IntValueNode):
        return Identifier.from_int(int(value_node.value))
    raise UnexpectedTokenError(value_node.kind)


GraphQLRecordID = GraphQLScalarType(
    name="RecordID",
    description=(
        "A record identifier. ObjectIds travel as `$oid:<24 hex>` strings, "
        "text ids as plain strings and integer ids as 32-bit numbers."
    ),
    serialize=serialize_identifier,
    parse_value=parse_identifier_value,
    parse_literal=parse_identifier_literal,
)

__all__ = [
    "GraphQLRecordID",
    "parse_identifier_literal",
    "parse_identifier_value",
    "serialize_identifier",
]
