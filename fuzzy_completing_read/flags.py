"""Call-scoped flags shared between the adapter and the fuzzy picker.

The adapter cannot pass an argument through the picker's public signature, so
it sets ``enable next call`` right before delegating. The picker's entry point
consumes that flag and exposes it as ``enabled this call`` to its key
handlers. Both live in context variables and are always restored with their
tokens, so nested completion requests each see their own values.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_ENABLE_NEXT_CALL: ContextVar[bool] = ContextVar("fuzzy_read_enable_next_call", default=False)
_ENABLED_THIS_CALL: ContextVar[bool] = ContextVar("fuzzy_read_enabled_this_call", default=False)


def next_call_enabled() -> bool:
    """Return whether the next picker invocation was requested by the adapter."""
    return _ENABLE_NEXT_CALL.get()


def this_call_enabled() -> bool:
    """Return whether the running picker invocation was started by the adapter."""
    return _ENABLED_THIS_CALL.get()


@contextmanager
def enable_next_call() -> Iterator[None]:
    """Mark the next picker invocation as adapter initiated."""
    token = _ENABLE_NEXT_CALL.set(True)
    try:
        yield
    finally:
        _ENABLE_NEXT_CALL.reset(token)


@contextmanager
def consume_next_call() -> Iterator[bool]:
    """Consume the next-call flag for the duration of one picker invocation.

    Yields:
        bool: Whether this invocation was started by the adapter
    """
    enabled = _ENABLE_NEXT_CALL.get()
    next_token = _ENABLE_NEXT_CALL.set(False)
    this_token = _ENABLED_THIS_CALL.set(enabled)
    try:
        yield enabled
    finally:
        _ENABLED_THIS_CALL.reset(this_token)
        _ENABLE_NEXT_CALL.reset(next_token)
