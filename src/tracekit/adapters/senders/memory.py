from __future__ import annotations

import logging
import sys
import threading
from typing import Any

from tracekit.adapters.encoding.span_converter import encode_span
from tracekit.adapters.senders.gate import PermitGate
from tracekit.domain.wire import WireSpan
from tracekit.ports.encoder import SpanEncoder
from tracekit.ports.sender import SenderError, SenderPort
from tracekit.shared.decorators import logged

_log = logging.getLogger(__name__)


class InMemorySender(SenderPort):
    """Sender which stores spans in memory.

    Appending a span blocks unless it is "permitted". By default
    `sys.maxsize` appends are permitted; `permit_append(n)` replaces the
    remaining budget so tests can stall the sender on purpose.

    Three sequences are kept:
    - appended: accepted since the last flush
    - flushed: everything ever moved out of `appended`
    - received: everything ever accepted, flushed or not
    """

    def __init__(
        self,
        encoder: SpanEncoder = encode_span,
        initial_permits: int = sys.maxsize,
    ) -> None:
        self._encoder = encoder
        self._gate = PermitGate(initial_permits)
        self._lock = threading.Lock()
        self._appended: list[WireSpan] = []
        self._flushed: list[WireSpan] = []
        self._received: list[WireSpan] = []

    def get_appended(self) -> list[WireSpan]:
        with self._lock:
            return list(self._appended)

    def get_flushed(self) -> list[WireSpan]:
        with self._lock:
            return list(self._flushed)

    def get_received(self) -> list[WireSpan]:
        with self._lock:
            return list(self._received)

    def append(self, span: Any) -> int:
        if self._gate.available == 0:
            _log.debug("append waiting for permit")
        # Never hold the buffer lock while parked on the gate
        self._gate.acquire()

        try:
            wire = self._encoder(span)
        except Exception as exc:
            raise SenderError(f"failed to encode span: {exc}", dropped_spans=1) from exc

        with self._lock:
            self._appended.append(wire)
            self._received.append(wire)
        return 0

    @logged
    def flush(self) -> int:
        with self._lock:
            count = len(self._appended)
            self._flushed.extend(self._appended)
            self._appended.clear()
        return count

    @logged
    def close(self) -> int:
        return self.flush()

    @logged
    def permit_append(self, number: int) -> None:
        """Remove previously granted append permits and grant `number` new ones."""
        self._gate.reset(number)

    @property
    def available_permits(self) -> int:
        return self._gate.available

    @property
    def blocked_appends(self) -> int:
        return self._gate.waiting

    def wait_for_blocked_appends(self, count: int = 1, timeout: float | None = None) -> bool:
        """Wait until `count` appends are parked on the permit gate."""
        return self._gate.wait_for_waiters(count, timeout=timeout)
