from .exporter import SenderSpanExporter

__all__ = [
    "SenderSpanExporter",
]
