from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class SenderError(Exception):
    """Raised by a sender when spans could not be accepted or delivered.

    `dropped_spans` is how many spans the failing call lost.
    """

    def __init__(self, message: str, dropped_spans: int = 0) -> None:
        super().__init__(message)
        self.dropped_spans = int(dropped_spans)


@runtime_checkable
class SenderPort(Protocol):
    """Transport contract used by reporters.

    `append` buffers one span and returns how many spans were flushed as a
    side effect. `flush` and `close` return how many spans were flushed.
    """

    def append(self, span: Any) -> int: ...

    def flush(self) -> int: ...

    def close(self) -> int: ...
