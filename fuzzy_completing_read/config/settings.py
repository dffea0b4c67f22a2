"""Process-wide adapter settings and per-call-site overrides.

The default settings are resolved once, on first use, and can be replaced at
startup with :func:`set_default_settings`. Code that needs different settings
for the reads it triggers wraps them in :func:`settings_override`.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterator, Optional
from ..utils.constants import DEFAULT_MAX_ITEMS

FALLBACK_NAMES = ("host", "standard")


def resolve_fallback_function() -> Callable:
    """Pick the fallback routine from the host's current completing-read function.

    The adapter, the fuzzy picker and the host dispatcher would recurse back
    into the adapter, so any of those resolves to the standard routine.
    """
    from .. import host
    from ..adapter import read_with_completion
    from ..engine import fuzzy_completing_read

    current = host.completing_read_function
    if current in (read_with_completion, fuzzy_completing_read, host.completing_read):
        return host.completing_read_default
    return current


def fallback_function_by_name(name: str) -> Callable:
    """Map a configured fallback name to a completing-read function.

    Args:
        name: "host" for the host's function at load time, "standard" for the standard routine

    Returns:
        Callable: The fallback routine
    """
    from .. import host

    if name == "standard":
        return host.completing_read_default
    return resolve_fallback_function()


@dataclass
class AdapterSettings:
    """Settings consulted by the adapter for every request."""

    fallback_function: Callable = field(default_factory=resolve_fallback_function)
    max_items: Optional[int] = DEFAULT_MAX_ITEMS
    debug: bool = False


def settings_from_config(config: Dict[str, Any]) -> AdapterSettings:
    """Build adapter settings from a validated configuration dictionary."""
    return AdapterSettings(
        fallback_function=fallback_function_by_name(config["fallback"]),
        max_items=config["maxItems"],
        debug=config["debug"]
    )


_default_settings: Optional[AdapterSettings] = None

_OVERRIDE: ContextVar[Optional[AdapterSettings]] = ContextVar("fuzzy_read_settings_override", default=None)


def get_default_settings() -> AdapterSettings:
    """Return the process-wide settings, resolving them on first use."""
    global _default_settings
    if _default_settings is None:
        _default_settings = AdapterSettings()
    return _default_settings


def set_default_settings(settings: Optional[AdapterSettings]) -> None:
    """Replace the process-wide settings (None re-resolves them on next use)."""
    global _default_settings
    _default_settings = settings


def current_settings() -> AdapterSettings:
    """Return the settings in effect for the current call."""
    return _OVERRIDE.get() or get_default_settings()


@contextmanager
def settings_override(**changes) -> Iterator[AdapterSettings]:
    """Override individual settings for the reads made inside the block.

    Example:
        with settings_override(max_items=None):
            read_with_completion("File: ", huge_list)
    """
    settings = replace(current_settings(), **changes)
    token = _OVERRIDE.set(settings)
    try:
        yield settings
    finally:
        _OVERRIDE.reset(token)
