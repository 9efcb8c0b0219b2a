"""ASON document model.

Every parsed value is one of a closed set of **frozen** dataclasses.
Containers hold their children in tuples, so a whole document is an
immutable value tree with structural equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


INTEGER_KINDS: dict[str, tuple[int, int]] = {
    "i8": (-(2**7), 2**7 - 1),
    "i16": (-(2**15), 2**15 - 1),
    "i32": (-(2**31), 2**31 - 1),
    "i64": (-(2**63), 2**63 - 1),
    "u8": (0, 2**8 - 1),
    "u16": (0, 2**16 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
}
"""Inclusive value range of each integer kind."""

FLOAT_KINDS: tuple[str, ...] = ("f32", "f64")

DEFAULT_INTEGER_KIND = "i32"
DEFAULT_FLOAT_KIND = "f64"


# ---------------------------------------------------------------------------
# Primitive values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IntegerValue:
    value: int
    kind: str = DEFAULT_INTEGER_KIND


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float
    kind: str = DEFAULT_FLOAT_KIND


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True, slots=True)
class CharValue:
    value: str
    """A single character."""


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class DateTimeValue:
    value: datetime


@dataclass(frozen=True, slots=True)
class ByteDataValue:
    value: bytes


# ---------------------------------------------------------------------------
# Composite values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[AsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class TupleValue:
    """Ordered, fixed-length composite of heterogeneous values."""

    items: tuple[AsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class ObjectEntry:
    key: str
    value: AsonValue


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """Key/value pairs in source order."""

    entries: tuple[ObjectEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class VariantValue:
    """An enumeration member, e.g. ``Option::Some(11)``.

    ``value`` is ``None`` for a bare member, an :class:`ObjectValue` for
    the ``Type::Member{...}`` form, a :class:`TupleValue` when the member
    carries more than one value, and the carried value otherwise.
    """

    type_name: str
    member_name: str
    value: AsonValue | None = None


AsonValue = Union[
    IntegerValue,
    FloatValue,
    BooleanValue,
    CharValue,
    StringValue,
    DateTimeValue,
    ByteDataValue,
    ListValue,
    TupleValue,
    ObjectValue,
    VariantValue,
]
