"""Fuzzy completing-read with a fallback to standard completion."""

__version__ = "0.3.0"

from .adapter import CompletionRequest, CompletionRequestAdapter, FallbackRequested, read_with_completion
from .candidates import all_completions
from .engine import FALLBACK, fuzzy_completing_read
from .fallback import standard_completing_read

__all__ = [
    "CompletionRequest",
    "CompletionRequestAdapter",
    "FallbackRequested",
    "FALLBACK",
    "all_completions",
    "fuzzy_completing_read",
    "read_with_completion",
    "standard_completing_read",
]
