from __future__ import annotations

from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.trace import SpanKind, StatusCode

from tracekit.adapters.encoding.span_converter import build_tag, build_tags, split_trace_id
from tracekit.domain.spans import ReferenceType
from tracekit.domain.wire import WireLog, WireReference, WireSpan, to_signed64

_KIND_TAGS = {
    SpanKind.SERVER: "server",
    SpanKind.CLIENT: "client",
    SpanKind.PRODUCER: "producer",
    SpanKind.CONSUMER: "consumer",
}


def _us(ns: int | None) -> int:
    return int(ns or 0) // 1_000


def _attr_value(value: Any) -> Any:
    # Sequence attributes have no wire slot; keep them readable
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def encode_readable_span(span: ReadableSpan) -> WireSpan:
    """Convert a finished OpenTelemetry SDK span into its wire record."""
    ctx = span.get_span_context()
    if ctx is None:
        raise ValueError(f"span {span.name!r} has no span context")

    low, high = split_trace_id(ctx.trace_id)
    parent = span.parent
    parent_id = to_signed64(parent.span_id) if parent is not None else 0

    tags = list(build_tags({k: _attr_value(v) for k, v in (span.attributes or {}).items()}))
    kind = _KIND_TAGS.get(span.kind)
    if kind is not None:
        tags.append(build_tag("span.kind", kind))
    status = span.status
    if status is not None and status.status_code is not StatusCode.UNSET:
        tags.append(build_tag("otel.status_code", status.status_code.name))
        if status.status_code is StatusCode.ERROR:
            tags.append(build_tag("error", True))
            if status.description:
                tags.append(build_tag("otel.status_description", status.description))

    logs = []
    for ev in span.events or ():
        fields = [build_tag("event", ev.name)]
        fields.extend(build_tags({k: _attr_value(v) for k, v in (ev.attributes or {}).items()}))
        logs.append(WireLog(timestamp=_us(ev.timestamp), fields=tuple(fields)))

    refs = []
    for link in span.links or ():
        l_low, l_high = split_trace_id(link.context.trace_id)
        refs.append(
            WireReference(
                ref_type=ReferenceType.FOLLOWS_FROM.value,
                trace_id_low=l_low,
                trace_id_high=l_high,
                span_id=to_signed64(link.context.span_id),
            )
        )

    start = span.start_time or 0
    end = span.end_time or start
    return WireSpan(
        trace_id_low=low,
        trace_id_high=high,
        span_id=to_signed64(ctx.span_id),
        parent_span_id=parent_id,
        operation_name=span.name,
        flags=1 if ctx.trace_flags.sampled else 0,
        start_time=_us(start),
        duration=_us(max(0, end - start)),
        references=tuple(refs),
        tags=tuple(tags),
        logs=tuple(logs),
    )
