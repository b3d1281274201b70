from __future__ import annotations

import unittest

from _support import make_span

from tracekit.adapters.encoding.span_converter import build_tag, encode_span, split_trace_id
from tracekit.domain.spans import ReferenceType, Span, SpanReference
from tracekit.domain.wire import TagType


class TestEncodeSpan(unittest.TestCase):
    def test_basic_fields(self) -> None:
        wire = encode_span(make_span("op", 7, parent_span_id=3))

        self.assertEqual("op", wire.operation_name)
        self.assertEqual(0xABC, wire.trace_id_low)
        self.assertEqual(0, wire.trace_id_high)
        self.assertEqual(7, wire.span_id)
        self.assertEqual(3, wire.parent_span_id)
        self.assertEqual(1, wire.flags)
        self.assertEqual(1_000, wire.start_time)
        self.assertEqual(2_500, wire.duration)
        self.assertEqual("test", wire.tag("component"))

    def test_128_bit_trace_id_is_split(self) -> None:
        trace_id = (0x1 << 64) | 0xFFFFFFFFFFFFFFFF
        self.assertEqual((-1, 1), split_trace_id(trace_id))

        span = make_span("op", trace_id=trace_id)
        wire = encode_span(span)
        self.assertEqual(-1, wire.trace_id_low)
        self.assertEqual(1, wire.trace_id_high)

    def test_tag_types(self) -> None:
        self.assertEqual(TagType.BOOL, build_tag("k", True).v_type)
        self.assertEqual(TagType.LONG, build_tag("k", 3).v_type)
        self.assertEqual(TagType.DOUBLE, build_tag("k", 1.5).v_type)
        self.assertEqual(TagType.BINARY, build_tag("k", b"\x00").v_type)
        self.assertEqual(TagType.STRING, build_tag("k", "v").v_type)

        other = build_tag("k", ["a", 1])
        self.assertEqual(TagType.STRING, other.v_type)
        self.assertEqual("['a', 1]", other.v_str)

    def test_logs_and_references(self) -> None:
        span = make_span("op", 2)
        span.log(2_000_000, {"event": "retry", "attempt": 2})
        span.references.append(SpanReference(ReferenceType.FOLLOWS_FROM, trace_id=0xABC, span_id=1))

        wire = encode_span(span)
        self.assertEqual(1, len(wire.logs))
        self.assertEqual(2_000, wire.logs[0].timestamp)
        self.assertEqual(["event", "attempt"], [f.key for f in wire.logs[0].fields])
        self.assertEqual("FOLLOWS_FROM", wire.references[0].ref_type)
        self.assertEqual(1, wire.references[0].span_id)

    def test_unfinished_span_has_zero_duration(self) -> None:
        span = Span(operation_name="op", trace_id=1, span_id=1, start_ns=5_000)
        self.assertEqual(0, encode_span(span).duration)

    def test_rejects_invalid_input(self) -> None:
        with self.assertRaises(TypeError):
            encode_span("nope")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            encode_span(Span(operation_name="op", trace_id=-1, span_id=1))
        with self.assertRaises(ValueError):
            encode_span(Span(operation_name="op", trace_id=1, span_id=1 << 64))

    def test_wire_span_is_immutable(self) -> None:
        wire = encode_span(make_span("op"))
        with self.assertRaises(Exception):
            wire.operation_name = "other"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
