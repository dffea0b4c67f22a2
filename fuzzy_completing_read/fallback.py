"""Standard completion routine.

This is the always-capable reader: a plain prompt_toolkit prompt with an
ordinary prefix completer. It accepts every collection shape, including
completion functions, and is what requests fall back to when the fuzzy picker
cannot serve them.
"""

from typing import Any, Callable, Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion, WordCompleter
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import ValidationError, Validator
from .candidates import all_completions, is_dynamic_collection, is_one_shot_collection
from .utils.constants import DEFAULT_COMPLETION_STYLE
from .utils.prompt_input import initial_document


class FunctionCompleter(Completer):
    """Completer that asks a completion function for its candidates."""

    def __init__(self, collection: Callable, predicate: Optional[Callable] = None):
        self.collection = collection
        self.predicate = predicate

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        for candidate in all_completions(text, self.collection, self.predicate):
            yield Completion(candidate, start_position=-len(text))


def collection_completer(collection: Any, predicate: Optional[Callable] = None) -> Completer:
    """Build the completer for a collection.

    Static collections use a WordCompleter over their expanded candidates;
    completion functions are asked for candidates on every keystroke.
    """
    if is_dynamic_collection(collection):
        return FunctionCompleter(collection, predicate)
    return WordCompleter(
        lambda: all_completions("", collection, predicate),
        ignore_case=True,
        sentence=True
    )


class MatchValidator(Validator):
    """Accept only input that is one of the collection's candidates (or empty)."""

    def __init__(self, collection: Any, predicate: Optional[Callable] = None):
        self.collection = collection
        self.predicate = predicate

    def validate(self, document):
        text = document.text
        # Empty input is accepted and resolved to the default
        if not text:
            return
        if text not in all_completions(text, self.collection, self.predicate):
            raise ValidationError(message="[No match]", cursor_position=len(text))


class StandardReader:
    """Reads a string with ordinary prefix completion."""

    def __init__(self, input=None, output=None, style: Optional[Style] = None):
        """Initialize the StandardReader.

        Args:
            input: prompt_toolkit input to read from (optional, the terminal by default)
            output: prompt_toolkit output to draw on (optional)
            style: Style for the prompt and completion menu (optional)
        """
        self.input = input
        self.output = output
        self.style = style or Style.from_dict(DEFAULT_COMPLETION_STYLE)

    def __call__(self, prompt: str, collection: Any, predicate: Optional[Callable] = None,
                 require_match: bool = False, initial_input: Any = None, history=None,
                 default: Any = None, inherit_input_method: bool = False) -> str:
        """Prompt the user and return the entered string.

        Empty input returns the default (its first element when it is a
        list), or "" when there is no default. There is no input method
        concept here, so inherit_input_method is ignored.
        """
        # Iterators are read once so completion and validation both see every item
        if is_one_shot_collection(collection):
            collection = list(collection)

        session = PromptSession(input=self.input, output=self.output, history=history)
        text = session.prompt(
            [('class:prompt', prompt)],
            completer=collection_completer(collection, predicate),
            complete_while_typing=False,
            validator=MatchValidator(collection, predicate) if require_match else None,
            default=initial_document(initial_input),
            style=self.style
        )

        if not text and default is not None:
            if isinstance(default, (list, tuple)):
                return default[0] if default else ""
            return default
        return text


def standard_completing_read(prompt: str, collection: Any, predicate: Optional[Callable] = None,
                             require_match: bool = False, initial_input: Any = None, history=None,
                             default: Any = None, inherit_input_method: bool = False) -> str:
    """Read a string from the terminal with standard completion."""
    return StandardReader()(prompt, collection, predicate, require_match,
                            initial_input, history, default, inherit_input_method)
