"""Transport-ready span records.

Field layout follows the Jaeger Thrift `Span` struct: ids are signed 64-bit
integers, times are microseconds, and every tag carries its value in exactly
one typed slot. Senders treat these values as opaque.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

_U64 = 1 << 64
_I64_MAX = (1 << 63) - 1


def to_signed64(value: int) -> int:
    """Reinterpret the low 64 bits of an unsigned id as a signed int64."""
    v = int(value) & (_U64 - 1)
    return v - _U64 if v > _I64_MAX else v


class TagType(str, Enum):
    STRING = "STRING"
    DOUBLE = "DOUBLE"
    BOOL = "BOOL"
    LONG = "LONG"
    BINARY = "BINARY"


@dataclass(frozen=True, slots=True)
class WireTag:
    key: str
    v_type: TagType
    v_str: Optional[str] = None
    v_double: Optional[float] = None
    v_bool: Optional[bool] = None
    v_long: Optional[int] = None
    v_binary: Optional[bytes] = None

    @property
    def value(self) -> Any:
        return {
            TagType.STRING: self.v_str,
            TagType.DOUBLE: self.v_double,
            TagType.BOOL: self.v_bool,
            TagType.LONG: self.v_long,
            TagType.BINARY: self.v_binary,
        }[self.v_type]


@dataclass(frozen=True, slots=True)
class WireLog:
    timestamp: int
    fields: tuple[WireTag, ...] = ()


@dataclass(frozen=True, slots=True)
class WireReference:
    ref_type: str
    trace_id_low: int
    trace_id_high: int
    span_id: int


@dataclass(frozen=True, slots=True)
class WireSpan:
    trace_id_low: int
    trace_id_high: int
    span_id: int
    parent_span_id: int
    operation_name: str
    flags: int
    start_time: int
    duration: int
    references: tuple[WireReference, ...] = ()
    tags: tuple[WireTag, ...] = ()
    logs: tuple[WireLog, ...] = ()

    def tag(self, key: str) -> Any:
        """Value of the first tag named `key`, or None."""
        for t in self.tags:
            if t.key == key:
                return t.value
        return None
