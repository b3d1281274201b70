from .gate import PermitGate
from .memory import InMemorySender
from .noop import NoopSender

__all__ = [
    "InMemorySender",
    "NoopSender",
    "PermitGate",
]
