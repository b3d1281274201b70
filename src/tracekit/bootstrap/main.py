from __future__ import annotations

import sys

from tracekit.shared.config import load_config, AppConfig
from tracekit.adapters.encoding.span_converter import encode_span
from tracekit.adapters.encoding.otel_converter import encode_readable_span
from tracekit.adapters.senders.memory import InMemorySender
from tracekit.adapters.senders.noop import NoopSender
from tracekit.ports.sender import SenderPort


def build_sender(cfg: AppConfig) -> SenderPort:
    sender_cfg = cfg.sender
    encoder = encode_readable_span if sender_cfg.encoder == "otel" else encode_span

    if sender_cfg.kind == "noop":
        return NoopSender(encoder=encoder)

    permits = sender_cfg.initial_permits
    return InMemorySender(
        encoder=encoder,
        initial_permits=sys.maxsize if permits is None else int(permits),
    )


def build_sender_from_file(config_path: str) -> SenderPort:
    return build_sender(load_config(config_path))
