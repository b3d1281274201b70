from __future__ import annotations
from functools import wraps
import logging

_log = logging.getLogger(__name__)

def logged(fn):
    """Log a sender method's result at DEBUG, or its failure with traceback.

    Senders that expose `available_permits` get the remaining budget
    appended to the success line.
    """
    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        name = f"{type(self).__name__}.{fn.__name__}"
        try:
            res = fn(self, *args, **kwargs)
        except Exception:
            _log.exception("%s: error", name)
            raise
        permits = getattr(self, "available_permits", None)
        if permits is None:
            _log.debug("%s: ok -> %s", name, res)
        else:
            _log.debug("%s: ok -> %s (permits=%s)", name, res, permits)
        return res
    return wrapper
