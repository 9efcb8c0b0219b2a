"""Tests for the canonical ASON printer (ason/printer.py).

Coverage:
* Literal formatting for every primitive kind.
* Block layout for objects and lists, inline layout for tuples.
* Variant payload forms.
* Parse → print → parse stability on realistic documents.
"""

from __future__ import annotations

import io
import math
from datetime import datetime

import pytest

from ason_query.ason import (
    AsonError,
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
    parse_from_str,
    print_to_string,
    print_to_writer,
)


def _obj(**entries: object) -> ObjectValue:
    return ObjectValue(tuple(ObjectEntry(k, v) for k, v in entries.items()))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

class TestPrimitives:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (IntegerValue(123), "123"),
            (IntegerValue(-3), "-3"),
            (IntegerValue(7, "u8"), "7_u8"),
            (FloatValue(1.0), "1.0"),
            (FloatValue(3.14), "3.14"),
            (FloatValue(1.5, "f32"), "1.5_f32"),
            (FloatValue(1e20), "1e+20"),
            (FloatValue(math.inf), "Inf"),
            (FloatValue(-math.inf), "-Inf"),
            (FloatValue(math.nan), "NaN"),
            (FloatValue(math.inf, "f32"), "Inf_f32"),
            (FloatValue(-math.inf, "f32"), "-Inf_f32"),
            (FloatValue(math.nan, "f32"), "NaN_f32"),
            (BooleanValue(True), "true"),
            (BooleanValue(False), "false"),
            (CharValue("a"), "'a'"),
            (CharValue("'"), r"'\''"),
            (StringValue('say "hi"\n'), r'"say \"hi\"\n"'),
            (StringValue("bell\x07"), r'"bell\u{7}"'),
            (DateTimeValue(datetime(2024, 3, 16, 16, 30)), 'd"2024-03-16T16:30:00"'),
            (ByteDataValue(b"\x11\xff"), 'h"11 ff"'),
        ],
    )
    def test_literal(self, value: object, expected: str) -> None:
        assert print_to_string(value) == expected  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestLayout:
    def test_object_one_entry_per_line(self) -> None:
        value = _obj(id=IntegerValue(123), name=StringValue("John"))
        assert print_to_string(value) == '{\n    id: 123\n    name: "John"\n}'

    def test_nested_blocks_are_indented(self) -> None:
        value = _obj(
            a=ListValue((IntegerValue(1), IntegerValue(2))),
            b=ObjectValue(),
        )
        assert print_to_string(value) == (
            "{\n"
            "    a: [\n"
            "        1\n"
            "        2\n"
            "    ]\n"
            "    b: {}\n"
            "}"
        )

    def test_empty_list(self) -> None:
        assert print_to_string(ListValue()) == "[]"

    def test_tuple_is_inline(self) -> None:
        value = TupleValue((IntegerValue(11), StringValue("x")))
        assert print_to_string(value) == '(11, "x")'

    def test_tuple_of_objects(self) -> None:
        value = TupleValue((_obj(id=IntegerValue(1)), IntegerValue(2)))
        assert print_to_string(value) == "({\n    id: 1\n}, 2)"

    def test_invalid_key_rejected(self) -> None:
        with pytest.raises(AsonError, match="not a valid identifier"):
            print_to_string(_obj(**{"two words": IntegerValue(1)}))

    def test_reserved_key_rejected(self) -> None:
        with pytest.raises(AsonError, match="not a valid identifier"):
            print_to_string(_obj(true=IntegerValue(1)))

    def test_non_finite_spelling_key_rejected(self) -> None:
        with pytest.raises(AsonError, match="not a valid identifier"):
            print_to_string(_obj(Inf_f32=IntegerValue(1)))

    def test_writer_matches_string(self) -> None:
        value = _obj(items=ListValue((BooleanValue(True),)))
        buffer = io.StringIO()
        print_to_writer(buffer, value)
        assert buffer.getvalue() == print_to_string(value)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class TestVariants:
    def test_bare(self) -> None:
        assert print_to_string(VariantValue("Option", "None")) == "Option::None"

    def test_single_value(self) -> None:
        value = VariantValue("Option", "Some", IntegerValue(11))
        assert print_to_string(value) == "Option::Some(11)"

    def test_multiple_values(self) -> None:
        value = VariantValue("Color", "RGB", TupleValue((IntegerValue(1), IntegerValue(2))))
        assert print_to_string(value) == "Color::RGB(1, 2)"

    def test_single_element_tuple_payload_keeps_parentheses(self) -> None:
        value = VariantValue("Wrap", "One", TupleValue((IntegerValue(1),)))
        text = print_to_string(value)
        assert text == "Wrap::One((1))"
        assert parse_from_str(text) == value

    def test_object_payload(self) -> None:
        value = VariantValue("Shape", "Rect", _obj(width=IntegerValue(1)))
        assert print_to_string(value) == "Shape::Rect{\n    width: 1\n}"


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

_DOCUMENTS = [
    '{id: 123, name: "John"}',
    "[11, 13, 17, 19]",
    """
    // an order document
    {
        id: 1001_u32
        customer: {name: "Alice", vip: true}
        items: [
            {sku: "A-1", price: 9.99, qty: 2_u8}
            {sku: "B-7", price: 1.5e3, qty: 1_u8}
        ]
        placed: d"2024-03-16T16:30:50+08:00"
        checksum: h"de ad be ef"
        status: Status::Shipped("2024-03-18")
        note: Option::None
        origin: (31.23, 121.47)
        initial: 'J'
        empty: []
    }
    """,
    '(11, "x", [Color::RGB(1, 2, 3)], {})',
    "[1e999f32, -Inf_f32, Inf, 0.5_f32]",
]


class TestRoundTrip:
    @pytest.mark.parametrize("text", _DOCUMENTS)
    def test_print_then_parse_is_identity(self, text: str) -> None:
        value = parse_from_str(text)
        assert parse_from_str(print_to_string(value)) == value

    @pytest.mark.parametrize("text", _DOCUMENTS)
    def test_canonical_form_is_stable(self, text: str) -> None:
        once = print_to_string(parse_from_str(text))
        assert print_to_string(parse_from_str(once)) == once

    def test_nan_keeps_its_kind(self) -> None:
        value = parse_from_str(print_to_string(FloatValue(math.nan, "f32")))
        assert isinstance(value, FloatValue)
        assert math.isnan(value.value)
        assert value.kind == "f32"
