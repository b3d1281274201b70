from .span_converter import encode_span

__all__ = [
    "encode_span",
]
