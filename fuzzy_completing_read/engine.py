"""Fuzzy single-selection picker.

The picker only understands a flat list of candidate strings and a single
default. Besides a selection it can return :data:`FALLBACK`, meaning the user
asked to switch to standard completion.

Key bindings:

* ``enter`` selects the first entry of the completion menu
* ``c-x c-f`` is the picker's own "switch to standard completion" command
* ``c-f`` at the end of the input and ``c-b`` at its start run the same
  command, but only when the adapter started this invocation
"""

from typing import Any, Callable, List, Optional, Sequence
from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style
from .candidates import all_completions
from .flags import consume_next_call, this_call_enabled
from .utils.constants import DEFAULT_COMPLETION_STYLE, FALLBACK_COMMAND_KEYS
from .utils.fzf_style_completion import FZFStyleCompleter
from .utils.prompt_input import initial_document


class _Fallback:
    """Result returned by the picker when the user asks for standard completion."""

    def __repr__(self):
        return "FALLBACK"


FALLBACK = _Fallback()


def resolve_selection(text: str, completer: FZFStyleCompleter, default: Optional[str] = None,
                      require_match: bool = False) -> Optional[str]:
    """Work out what pressing enter selects.

    A candidate typed in full is taken as is; otherwise the first entry of
    the completion menu is selected.

    Args:
        text: Current input text
        completer: The picker's completer, which orders the matches
        default: Default returned for empty input (optional)
        require_match: Whether input must match a candidate

    Returns:
        Optional[str]: The selection, or None when nothing may be accepted
    """
    if not text:
        if default:
            return default
        if completer.candidates:
            return completer.candidates[0]
        return None if require_match else ""

    if text in completer.candidates:
        return text
    matches = completer.ranked(text)
    if matches:
        return matches[0]
    if require_match:
        return None
    return text


def fallback_command(event) -> None:
    """Leave the picker and ask for standard completion instead."""
    event.app.exit(result=FALLBACK)


def create_keybindings(completer: FZFStyleCompleter, default: Optional[str] = None,
                       require_match: bool = False) -> KeyBindings:
    """Create the picker's key bindings for one invocation."""
    kb = KeyBindings()

    adapter_enabled = Condition(this_call_enabled)
    at_end = Condition(lambda: get_app().current_buffer.document.is_cursor_at_the_end)
    at_start = Condition(lambda: get_app().current_buffer.cursor_position == 0)

    @kb.add("enter")
    def _(event) -> None:
        """Enter: select the first match."""
        selection = resolve_selection(event.current_buffer.text, completer, default, require_match)
        if selection is None:
            event.app.output.bell()
            return
        event.app.exit(result=selection)

    @kb.add(*FALLBACK_COMMAND_KEYS)
    def _(event) -> None:
        fallback_command(event)

    @kb.add("c-f", filter=adapter_enabled & at_end)
    def _(event) -> None:
        """Ctrl+F past the end of the input: switch to standard completion."""
        fallback_command(event)

    @kb.add("c-b", filter=adapter_enabled & at_start)
    def _(event) -> None:
        """Ctrl+B before the start of the input: switch to standard completion."""
        fallback_command(event)

    return kb


class FuzzyReader:
    """FZF-style picker over a list of candidate strings."""

    def __init__(self, input=None, output=None, style: Optional[Style] = None):
        """Initialize the FuzzyReader.

        Args:
            input: prompt_toolkit input to read from (optional, the terminal by default)
            output: prompt_toolkit output to draw on (optional)
            style: Style for the prompt and completion menu (optional)
        """
        self.input = input
        self.output = output
        self.style = style or Style.from_dict(DEFAULT_COMPLETION_STYLE)

    def __call__(self, prompt: str, choices: Sequence[Any], predicate: Optional[Callable] = None,
                 require_match: bool = False, initial_input: Any = None, history=None,
                 default: Optional[str] = None, inherit_input_method: bool = False) -> Any:
        """Let the user pick one of the choices.

        Returns:
            The selected string, or FALLBACK
        """
        with consume_next_call():
            return self._read(prompt, choices, predicate, require_match,
                              initial_input, history, default, inherit_input_method)

    def _read(self, prompt: str, choices: Sequence[Any], predicate: Optional[Callable],
              require_match: bool, initial_input: Any, history,
              default: Optional[str], inherit_input_method: bool) -> Any:
        completer = FZFStyleCompleter(self._prepare_candidates(choices, predicate))

        session = PromptSession(input=self.input, output=self.output, history=history)
        result = session.prompt(
            [('class:prompt', prompt)],
            completer=completer,
            complete_while_typing=True,
            key_bindings=create_keybindings(completer, default, require_match),
            default=initial_document(initial_input),
            style=self.style
        )

        if history is not None and isinstance(result, str) and result:
            history.append_string(result)
        return result

    def _prepare_candidates(self, choices: Sequence[Any], predicate: Optional[Callable]) -> List[str]:
        """Flatten the choices into candidate strings, keeping their order.

        The predicate only matters for direct calls: the adapter applies it
        while expanding the collection and passes None here.
        """
        return all_completions("", list(choices), predicate)


def fuzzy_completing_read(prompt: str, choices: Sequence[Any], predicate: Optional[Callable] = None,
                          require_match: bool = False, initial_input: Any = None, history=None,
                          default: Optional[str] = None, inherit_input_method: bool = False) -> Any:
    """Pick one of the choices in the terminal with the fuzzy picker."""
    return FuzzyReader()(prompt, choices, predicate, require_match,
                         initial_input, history, default, inherit_input_method)
