from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class ReferenceType(str, Enum):
    CHILD_OF = "CHILD_OF"
    FOLLOWS_FROM = "FOLLOWS_FROM"


@dataclass(frozen=True, slots=True)
class SpanReference:
    ref_type: ReferenceType
    trace_id: int
    span_id: int


@dataclass(frozen=True, slots=True)
class SpanLog:
    """Timestamped set of key/value fields attached to a span."""

    ts_ns: int
    fields: Mapping[str, Any]


@dataclass
class Span:
    """Tracer-side span as handed to a sender.

    Ids are unsigned ints: `trace_id` may use up to 128 bits, span ids 64.
    `parent_span_id == 0` marks a root span.
    """

    operation_name: str
    trace_id: int
    span_id: int
    parent_span_id: int = 0
    flags: int = 1
    start_ns: int = 0
    end_ns: Optional[int] = None
    tags: Dict[str, Any] = field(default_factory=dict)
    logs: List[SpanLog] = field(default_factory=list)
    references: List[SpanReference] = field(default_factory=list)

    @property
    def duration_ns(self) -> int:
        if self.end_ns is None:
            return 0
        return max(0, self.end_ns - self.start_ns)

    def log(self, ts_ns: int, fields: Mapping[str, Any]) -> None:
        self.logs.append(SpanLog(ts_ns=ts_ns, fields=dict(fields)))
