from __future__ import annotations

import logging
import sys
import threading
from typing import Sequence

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from tracekit.adapters.encoding.otel_converter import encode_readable_span
from tracekit.adapters.senders.memory import InMemorySender
from tracekit.ports.sender import SenderError, SenderPort

_log = logging.getLogger(__name__)


class SenderSpanExporter(SpanExporter):
    """OpenTelemetry exporter that hands finished spans to a sender.

    The sender is responsible for encoding, so it must accept `ReadableSpan`
    (e.g. an `InMemorySender` built with `encode_readable_span`). Appends
    block when the sender does, which lets span processors be tested
    against a stalled transport.
    """

    def __init__(self, sender: SenderPort) -> None:
        self.sender = sender
        self._stopped = False
        self._lock = threading.Lock()

    @classmethod
    def in_memory(cls, initial_permits: int = sys.maxsize) -> "SenderSpanExporter":
        return cls(InMemorySender(encoder=encode_readable_span, initial_permits=initial_permits))

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        if self._stopped:
            return SpanExportResult.FAILURE
        for span in spans:
            try:
                self.sender.append(span)
            except SenderError as exc:
                _log.warning("span export failed (%d dropped): %s", exc.dropped_spans, exc)
                return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        try:
            self.sender.flush()
        except SenderError as exc:
            _log.warning("sender flush failed: %s", exc)
            return False
        return True

    def shutdown(self) -> None:
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
        try:
            self.sender.close()
        except SenderError as exc:
            _log.warning("sender close failed: %s", exc)
