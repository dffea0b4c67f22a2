"""The host's generic completing-read contract.

Callers that want "read a string with completion" go through
:func:`completing_read`, which dispatches to whatever function is currently
installed as ``completing_read_function``. :func:`install` puts the fuzzy
adapter there; :func:`uninstall` puts the previous function back.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Dict, Iterator, List, Optional
from .fallback import standard_completing_read

# The standard routine, always available regardless of what is installed
completing_read_default = standard_completing_read

# The routine completing_read currently dispatches to
completing_read_function: Callable = completing_read_default

_previous_functions: List[Callable] = []

_EXTRA_PROPERTIES: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "fuzzy_read_completion_extra_properties", default=None
)


def completing_read(prompt: str, collection: Any, predicate: Optional[Callable] = None,
                    require_match: bool = False, initial_input: Any = None, history=None,
                    default: Any = None, inherit_input_method: bool = False) -> str:
    """Read a string with completion using the installed completing-read function."""
    return completing_read_function(prompt, collection, predicate, require_match,
                                    initial_input, history, default, inherit_input_method)


def completion_extra_properties() -> Optional[Dict[str, Any]]:
    """Return the extra completion properties bound for the current call, if any."""
    return _EXTRA_PROPERTIES.get()


@contextmanager
def extra_completion_properties(properties: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Bind extra completion properties (annotations, categories...) for nested reads."""
    token = _EXTRA_PROPERTIES.set(properties)
    try:
        yield properties
    finally:
        _EXTRA_PROPERTIES.reset(token)


def is_installed() -> bool:
    """Check if the fuzzy adapter is the installed completing-read function."""
    from .adapter import read_with_completion
    return completing_read_function is read_with_completion


def install() -> None:
    """Install the fuzzy adapter as the completing-read function."""
    global completing_read_function
    from .adapter import read_with_completion

    if completing_read_function is read_with_completion:
        return
    _previous_functions.append(completing_read_function)
    completing_read_function = read_with_completion


def uninstall() -> None:
    """Restore the completing-read function that was active before install()."""
    global completing_read_function
    if not is_installed():
        return
    completing_read_function = _previous_functions.pop() if _previous_functions else completing_read_default
