"""Adapter between the generic completing-read contract and the fuzzy picker.

The adapter accepts every request the standard routine accepts. Requests the
picker can represent are rewritten into its flat-list, single-default shape
and served by it. Everything else, and any request where the user asks for
standard completion from inside the picker, goes to the fallback routine with
the original arguments.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple
from rich.console import Console
from rich.markup import escape
from . import host
from .candidates import all_completions, is_dynamic_collection, is_one_shot_collection
from .config.settings import AdapterSettings, current_settings
from .engine import FALLBACK, fuzzy_completing_read
from .flags import enable_next_call
from .utils.prompt_input import initial_text


class FallbackRequested(Exception):
    """The request has to be served by the fallback routine."""


@dataclass(frozen=True)
class CompletionRequest:
    """Arguments of one completing-read call."""

    prompt: str
    collection: Any
    predicate: Optional[Callable] = None
    require_match: bool = False
    initial_input: Any = None
    history: Any = None
    default: Any = None
    inherit_input_method: bool = False

    def as_args(self) -> Tuple:
        """Return the request as positional completing-read arguments."""
        return (self.prompt, self.collection, self.predicate, self.require_match,
                self.initial_input, self.history, self.default, self.inherit_input_method)


class CompletionRequestAdapter:
    """Serves completion requests with the fuzzy picker when it can.

    The engine is any callable with the completing-read signature that
    returns a selection or FALLBACK.
    """

    def __init__(self, engine: Optional[Callable] = None, settings: Optional[AdapterSettings] = None,
                 console: Optional[Console] = None):
        """Initialize the adapter.

        Args:
            engine: Picker to delegate to (defaults to the fuzzy picker)
            settings: Fixed settings (defaults to the settings in effect at each call)
            console: Rich console for debug output (optional)
        """
        self.engine = engine or fuzzy_completing_read
        self._settings = settings
        self.console = console or Console(stderr=True)

    @property
    def settings(self) -> AdapterSettings:
        return self._settings or current_settings()

    def adapt(self, request: CompletionRequest) -> Any:
        """Serve a request, falling back with the original arguments when needed."""
        settings = self.settings
        orig_args = request.as_args()
        try:
            return self._serve(request, settings)
        except FallbackRequested:
            self._debug(settings, f"falling back for {request.prompt!r}")
            return settings.fallback_function(*orig_args)

    def _serve(self, request: CompletionRequest, settings: AdapterSettings) -> Any:
        if request.inherit_input_method:
            self._debug(settings, "input method inheritance is not supported")
            raise FallbackRequested()
        if host.completion_extra_properties():
            self._debug(settings, "extra completion properties are not supported")
            raise FallbackRequested()
        if is_dynamic_collection(request.collection):
            self._debug(settings, "completion functions are not supported")
            raise FallbackRequested()
        if is_one_shot_collection(request.collection):
            # Expanding an iterator would leave the fallback an empty source
            self._debug(settings, "one-shot iterators are not supported")
            raise FallbackRequested()

        candidates = all_completions("", request.collection, request.predicate)
        if settings.max_items is not None and len(candidates) > settings.max_items:
            self._debug(settings, f"{len(candidates)} candidates exceed the limit of {settings.max_items}")
            raise FallbackRequested()

        candidates, default = self._normalize_default(candidates, request.default)

        if default and initial_text(request.initial_input):
            # The picker mishandles a default together with initial input:
            # offer the default first instead and keep the typed text
            self._debug(settings, f"moving default {default!r} to the front of the candidates")
            candidates = [default] + [c for c in candidates if c != default]
            default = None

        # The predicate has been applied to the candidate list already
        rewritten = replace(request, collection=candidates, predicate=None, default=default)

        with enable_next_call():
            result = self.engine(*rewritten.as_args())

        if result is FALLBACK:
            self._debug(settings, "standard completion requested from the picker")
            raise FallbackRequested()
        return result

    def _normalize_default(self, candidates: List[str], default: Any) -> Tuple[List[str], Optional[str]]:
        """Reduce a list default to the picker's single default.

        All list defaults are moved to the top of the candidates, in order,
        and the first becomes the default.
        """
        if not isinstance(default, (list, tuple)):
            return candidates, default
        if not default:
            return candidates, None

        defaults = list(default)
        placed = set(defaults)
        return defaults + [c for c in candidates if c not in placed], defaults[0]

    def _debug(self, settings: AdapterSettings, message: str) -> None:
        if settings.debug:
            self.console.print(f"[dim]fuzzy-read: {escape(message)}[/dim]")


_default_adapter = CompletionRequestAdapter()


def read_with_completion(prompt: str, collection: Any, predicate: Optional[Callable] = None,
                         require_match: bool = False, initial_input: Any = None, history=None,
                         default: Any = None, inherit_input_method: bool = False) -> Any:
    """Read a string with completion, using the fuzzy picker when possible.

    Takes the same arguments and returns the same result as the standard
    completing-read routine, so it can be installed in its place.
    """
    request = CompletionRequest(prompt, collection, predicate, require_match,
                                initial_input, history, default, inherit_input_method)
    return _default_adapter.adapt(request)
