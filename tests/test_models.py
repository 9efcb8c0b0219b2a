"""Tests for value objects (core/models.py, core/config.py, ason/nodes.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and container behaviour.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ason_query.ason import (
    IntegerValue,
    ListValue,
    ObjectEntry,
    ObjectValue,
    StringValue,
    TupleValue,
    VariantValue,
)
from ason_query.core.config import Configuration
from ason_query.core.models import ARGUMENT_LABEL, STDIN_LABEL, SourceKind, TextSource


# ---------------------------------------------------------------------------
# TextSource
# ---------------------------------------------------------------------------

class TestTextSource:
    def test_from_file(self) -> None:
        source = TextSource.from_file(Path("data/a.ason"))
        assert source.kind is SourceKind.FILE
        assert source.path == Path("data/a.ason")
        assert source.label == str(Path("data/a.ason"))
        assert source.text is None

    def test_from_stdin(self) -> None:
        source = TextSource.from_stdin()
        assert source.kind is SourceKind.STDIN
        assert source.label == STDIN_LABEL
        assert source.path is None

    def test_from_text(self) -> None:
        source = TextSource.from_text("[1]")
        assert source.kind is SourceKind.ARGUMENT
        assert source.label == ARGUMENT_LABEL
        assert source.text == "[1]"

    def test_frozen(self) -> None:
        source = TextSource.from_stdin()
        with pytest.raises(AttributeError):
            source.label = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert TextSource.from_file(Path("a")) == TextSource.from_file(Path("a"))
        assert TextSource.from_file(Path("a")) != TextSource.from_file(Path("b"))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class TestConfiguration:
    def test_defaults(self) -> None:
        config = Configuration()
        assert config.output is None
        assert config.input_files == ()
        assert config.input_text is None
        assert config.verbose is False

    def test_has_query(self) -> None:
        assert Configuration().has_query is False
        assert Configuration(query_expression=".").has_query is True

    def test_query_file_alone_is_not_a_query_expression(self) -> None:
        assert Configuration(query_file=Path("q.aql")).has_query is False


# ---------------------------------------------------------------------------
# ASON nodes
# ---------------------------------------------------------------------------

class TestNodes:
    def test_integer_kind_is_part_of_equality(self) -> None:
        assert IntegerValue(1) == IntegerValue(1, "i32")
        assert IntegerValue(1) != IntegerValue(1, "u8")

    def test_containers_are_sized(self) -> None:
        assert len(ListValue()) == 0
        assert len(TupleValue((IntegerValue(1), IntegerValue(2)))) == 2

    def test_object_is_sized(self) -> None:
        obj = ObjectValue(
            (
                ObjectEntry("id", IntegerValue(123)),
                ObjectEntry("name", StringValue("John")),
            )
        )
        assert len(obj) == 2

    def test_object_entry_order_matters(self) -> None:
        a = ObjectEntry("a", IntegerValue(1))
        b = ObjectEntry("b", IntegerValue(2))
        assert ObjectValue((a, b)) != ObjectValue((b, a))

    def test_variant_defaults_to_bare(self) -> None:
        assert VariantValue("Option", "None").value is None

    def test_nodes_are_hashable(self) -> None:
        value = TupleValue((IntegerValue(1), StringValue("x")))
        assert value in {value}
