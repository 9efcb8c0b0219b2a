"""ASON format layer — document model, parser and canonical printer.

Core code uses the node types directly; parsing and printing are reached
only through the :class:`~ason_query.infra.ason_codec.AsonCodec` adapter.
"""

from ason_query.ason.errors import AsonError, AsonParseError, Location
from ason_query.ason.nodes import (
    AsonValue,
    BooleanValue,
    ByteDataValue,
    CharValue,
    DateTimeValue,
    FloatValue,
    IntegerValue,
    ListValue,
    ObjectEntry,
    ObjectValue,
    StringValue,
    TupleValue,
    VariantValue,
)
from ason_query.ason.parser import parse_from_str
from ason_query.ason.printer import print_to_string, print_to_writer

__all__: list[str] = [
    "AsonError",
    "AsonParseError",
    "AsonValue",
    "BooleanValue",
    "ByteDataValue",
    "CharValue",
    "DateTimeValue",
    "FloatValue",
    "IntegerValue",
    "ListValue",
    "Location",
    "ObjectEntry",
    "ObjectValue",
    "StringValue",
    "TupleValue",
    "VariantValue",
    "parse_from_str",
    "print_to_string",
    "print_to_writer",
]
