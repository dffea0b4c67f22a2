"""Helpers for the initial-input argument shared by both readers."""

from typing import Any
from prompt_toolkit.document import Document


def initial_text(initial_input: Any) -> str:
    """Return the text part of an initial input.

    The initial input is either a string, a ``(text, cursor_index)`` pair,
    or None.
    """
    if initial_input is None:
        return ""
    if isinstance(initial_input, (tuple, list)):
        return initial_input[0] if initial_input else ""
    return initial_input


def initial_document(initial_input: Any) -> Document:
    """Build the prompt_toolkit document a prompt starts with.

    A ``(text, cursor_index)`` pair places the cursor at that zero-based
    index (clamped to the text); a plain string leaves it at the end.
    """
    text = initial_text(initial_input)
    if isinstance(initial_input, (tuple, list)) and len(initial_input) > 1:
        position = min(max(int(initial_input[1]), 0), len(text))
        return Document(text, cursor_position=position)
    return Document(text)
