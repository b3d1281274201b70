from __future__ import annotations

from typing import Any, Iterable, Mapping

from tracekit.domain.spans import Span, SpanLog, SpanReference
from tracekit.domain.wire import (
    TagType,
    WireLog,
    WireReference,
    WireSpan,
    WireTag,
    to_signed64,
)

_MAX_TRACE_ID = (1 << 128) - 1
_MAX_SPAN_ID = (1 << 64) - 1


def _us(ns: int) -> int:
    return int(ns) // 1_000


def split_trace_id(trace_id: int) -> tuple[int, int]:
    """(low, high) signed halves of a 128-bit trace id."""
    tid = int(trace_id)
    return to_signed64(tid), to_signed64(tid >> 64)


def build_tag(key: str, value: Any) -> WireTag:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return WireTag(key=key, v_type=TagType.BOOL, v_bool=value)
    if isinstance(value, int):
        return WireTag(key=key, v_type=TagType.LONG, v_long=int(value))
    if isinstance(value, float):
        return WireTag(key=key, v_type=TagType.DOUBLE, v_double=float(value))
    if isinstance(value, (bytes, bytearray)):
        return WireTag(key=key, v_type=TagType.BINARY, v_binary=bytes(value))
    if isinstance(value, str):
        return WireTag(key=key, v_type=TagType.STRING, v_str=value)
    return WireTag(key=key, v_type=TagType.STRING, v_str=str(value))


def build_tags(tags: Mapping[str, Any] | None) -> tuple[WireTag, ...]:
    return tuple(build_tag(str(k), v) for k, v in (tags or {}).items())


def build_logs(logs: Iterable[SpanLog]) -> tuple[WireLog, ...]:
    return tuple(WireLog(timestamp=_us(lg.ts_ns), fields=build_tags(lg.fields)) for lg in logs)


def build_references(refs: Iterable[SpanReference]) -> tuple[WireReference, ...]:
    out: list[WireReference] = []
    for ref in refs:
        low, high = split_trace_id(ref.trace_id)
        out.append(
            WireReference(
                ref_type=str(getattr(ref.ref_type, "value", ref.ref_type)),
                trace_id_low=low,
                trace_id_high=high,
                span_id=to_signed64(ref.span_id),
            )
        )
    return tuple(out)


def _check(span: Span) -> None:
    if not 0 <= int(span.trace_id) <= _MAX_TRACE_ID:
        raise ValueError(f"trace_id out of range: {span.trace_id!r}")
    for name in ("span_id", "parent_span_id"):
        v = int(getattr(span, name))
        if not 0 <= v <= _MAX_SPAN_ID:
            raise ValueError(f"{name} out of range: {v!r}")
    if span.start_ns < 0 or (span.end_ns is not None and span.end_ns < 0):
        raise ValueError("span timestamps must be non-negative")


def encode_span(span: Span) -> WireSpan:
    """Convert a tracer `Span` into its wire record."""
    if not isinstance(span, Span):
        raise TypeError(f"expected Span, got {type(span).__name__}")
    _check(span)

    low, high = split_trace_id(span.trace_id)
    return WireSpan(
        trace_id_low=low,
        trace_id_high=high,
        span_id=to_signed64(span.span_id),
        parent_span_id=to_signed64(span.parent_span_id),
        operation_name=str(span.operation_name),
        flags=int(span.flags),
        start_time=_us(span.start_ns),
        duration=_us(span.duration_ns),
        references=build_references(span.references),
        tags=build_tags(span.tags),
        logs=build_logs(span.logs),
    )
