from __future__ import annotations

from typing import Any, Protocol

from tracekit.domain.wire import WireSpan


class SpanEncoder(Protocol):
    """Pure conversion of a tracer span into its wire record.

    Any exception raised is treated by senders as an encoding failure.
    """

    def __call__(self, span: Any) -> WireSpan: ...
