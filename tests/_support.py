from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from tracekit.domain.spans import Span


def make_span(name: str, span_id: int = 1, *, trace_id: int = 0xABC, parent_span_id: int = 0) -> Span:
    return Span(
        operation_name=name,
        trace_id=trace_id,
        span_id=span_id,
        parent_span_id=parent_span_id,
        start_ns=1_000_000,
        end_ns=3_500_000,
        tags={"component": "test"},
    )
