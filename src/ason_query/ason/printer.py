"""Canonical ASON printer.

Objects and lists are written one element per line with four-space
indentation; tuples and variant payloads are written inline.  The
output always parses back to a value equal to the printed one.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TextIO

from ason_query.ason.errors import AsonError
from ason_query.ason.lexer import IDENT_RE, RESERVED_WORDS
from ason_query.ason.nodes import (
    DEFAULT_FLOAT_KIND,
    DEFAULT_INTEGER_KIND,
    AsonValue,
    BooleanValue,
    ByteDataValue,
    CharValue,
    DateTimeValue,
    FloatValue,
    IntegerValue,
    ListValue,
    ObjectValue,
    StringValue,
    TupleValue,
    VariantValue,
)

INDENT = "    "

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


class Printer:
    """Writes a value tree through a ``write`` callable."""

    def __init__(self, write: Callable[[str], object]) -> None:
        self._write = write

    def print_value(self, value: AsonValue, level: int = 0) -> None:
        write = self._write
        if isinstance(value, (ListValue, ObjectValue)):
            self._print_block(value, level)
        elif isinstance(value, TupleValue):
            write("(")
            self._print_inline(value.items, level)
            write(")")
        elif isinstance(value, VariantValue):
            self._print_variant(value, level)
        else:
            write(format_primitive(value))

    def _print_block(self, value: ListValue | ObjectValue, level: int) -> None:
        write = self._write
        is_list = isinstance(value, ListValue)
        opening, closing = ("[", "]") if is_list else ("{", "}")
        if len(value) == 0:
            write(opening + closing)
            return
        write(opening + "\n")
        inner = INDENT * (level + 1)
        if isinstance(value, ListValue):
            for item in value.items:
                write(inner)
                self.print_value(item, level + 1)
                write("\n")
        else:
            for entry in value.entries:
                if IDENT_RE.fullmatch(entry.key) is None or entry.key in RESERVED_WORDS:
                    raise AsonError(f"object key {entry.key!r} is not a valid identifier")
                write(f"{inner}{entry.key}: ")
                self.print_value(entry.value, level + 1)
                write("\n")
        write(INDENT * level + closing)

    def _print_inline(self, items: tuple[AsonValue, ...], level: int) -> None:
        for index, item in enumerate(items):
            if index:
                self._write(", ")
            self.print_value(item, level)

    def _print_variant(self, value: VariantValue, level: int) -> None:
        write = self._write
        write(f"{value.type_name}::{value.member_name}")
        payload = value.value
        if payload is None:
            return
        if isinstance(payload, ObjectValue):
            self._print_block(payload, level)
        elif isinstance(payload, TupleValue) and len(payload) > 1:
            write("(")
            self._print_inline(payload.items, level)
            write(")")
        else:
            # a short tuple payload keeps its own parentheses
            write("(")
            self.print_value(payload, level)
            write(")")


def format_primitive(value: AsonValue) -> str:
    """Return the literal text of a non-container value."""
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, IntegerValue):
        suffix = "" if value.kind == DEFAULT_INTEGER_KIND else f"_{value.kind}"
        return f"{value.value}{suffix}"
    if isinstance(value, FloatValue):
        return _format_float(value)
    if isinstance(value, CharValue):
        return "'" + _escape(value.value, "'") + "'"
    if isinstance(value, StringValue):
        return '"' + _escape(value.value, '"') + '"'
    if isinstance(value, DateTimeValue):
        return f'd"{value.value.isoformat()}"'
    if isinstance(value, ByteDataValue):
        return 'h"' + " ".join(f"{octet:02x}" for octet in value.value) + '"'
    raise AsonError(f"cannot print value of type {type(value).__name__}")


def _format_float(value: FloatValue) -> str:
    number = value.value
    suffix = "" if value.kind == DEFAULT_FLOAT_KIND else f"_{value.kind}"
    if math.isnan(number):
        text = "NaN"
    elif math.isinf(number):
        text = "Inf" if number > 0 else "-Inf"
    else:
        text = repr(number)
        if "." not in text and "e" not in text:
            text += ".0"
    return text + suffix


def _escape(text: str, quote: str) -> str:
    parts: list[str] = []
    for ch in text:
        if ch == quote:
            parts.append("\\" + ch)
        elif ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return "".join(parts)


def print_to_string(value: AsonValue) -> str:
    """Render *value* in canonical form."""
    parts: list[str] = []
    Printer(parts.append).print_value(value)
    return "".join(parts)


def print_to_writer(stream: TextIO, value: AsonValue) -> None:
    """Render *value* directly onto a text stream."""
    Printer(stream.write).print_value(value)
