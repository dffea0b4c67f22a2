""" FZF-style completer for the fuzzy picker using prompt_toolkit """
from typing import List, Sequence
from prompt_toolkit.completion import CompleteEvent, Completer, Completion, FuzzyCompleter, WordCompleter
from prompt_toolkit.document import Document
from .constants import CURRENT_MATCH_MARKER

class FZFStyleCompleter(Completer):
    """Simple FZF-style completer with fuzzy matching."""

    def __init__(self, candidates: Sequence[str]):
        self.candidates = list(candidates)
        # Wrap a WordCompleter with FuzzyCompleter; WORD=True keeps
        # punctuation such as '-' or '/' inside the fuzzy pattern
        self.completer = FuzzyCompleter(WordCompleter(
            self.candidates,
            ignore_case=True
        ), WORD=True)

    def get_completions(self, document, complete_event):
        for i, completion in enumerate(self.completer.get_completions(document, complete_event)):
            candidate = completion.text

            # Add arrow to first match, the one enter selects
            display = f"{CURRENT_MATCH_MARKER}{candidate}" if i == 0 else f"  {candidate}"

            yield Completion(
                candidate,
                start_position=completion.start_position,
                display=display
            )

    def ranked(self, text: str) -> List[str]:
        """Return the candidates matching text, in the order the menu shows them."""
        return [c.text for c in self.get_completions(Document(text), CompleteEvent())]
