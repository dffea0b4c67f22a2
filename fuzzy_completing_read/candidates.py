"""Candidate expansion for completion collections.

A completion collection can take several shapes and this module knows how to
turn any of them into a flat list of candidate strings:

* a sequence of strings (or other atoms, converted with ``str``)
* a sequence of sequences, where the first element of each item is the key
* a dict, whose keys are the candidates
* a callable, called as ``collection(prefix, predicate, True)``
"""

from collections.abc import Iterator
from typing import Any, Callable, Iterable, List, Optional


def candidate_key(item: Any) -> str:
    """Return the completion key of a single collection item.

    Args:
        item: A string, an atom, or a sequence whose first element is the key

    Returns:
        str: The key as a string
    """
    if isinstance(item, str):
        return item
    if isinstance(item, (list, tuple)):
        if not item:
            return ""
        return str(item[0])
    return str(item)


def is_dynamic_collection(collection: Any) -> bool:
    """Check if a collection is a completion function rather than a set of candidates."""
    return callable(collection) and not isinstance(collection, (list, tuple, dict, set, frozenset))


def is_one_shot_collection(collection: Any) -> bool:
    """Check if a collection is an iterator that expanding it would use up."""
    return isinstance(collection, Iterator)


def _matches_prefix(key: str, prefix: str, ignore_case: bool) -> bool:
    if not prefix:
        return True
    if ignore_case:
        return key.lower().startswith(prefix.lower())
    return key.startswith(prefix)


def all_completions(prefix: str, collection: Any, predicate: Optional[Callable] = None,
                    ignore_case: bool = False) -> List[str]:
    """Return every candidate of a collection that completes a prefix.

    Candidates are returned in the collection's own order and duplicates are
    kept. The predicate is called with the string for plain sequences, with
    the whole item for sequences of sequences, and with ``(key, value)`` for
    dicts.

    Args:
        prefix: Text every returned candidate must start with ("" for all)
        collection: The completion collection
        predicate: Optional filter applied to each item
        ignore_case: Whether prefix matching ignores case

    Returns:
        List[str]: Matching candidates
    """
    if collection is None:
        return []

    if is_dynamic_collection(collection):
        return list(collection(prefix, predicate, True) or [])

    if isinstance(collection, dict):
        results = []
        for key, value in collection.items():
            key_text = candidate_key(key)
            if not _matches_prefix(key_text, prefix, ignore_case):
                continue
            if predicate is not None and not predicate(key, value):
                continue
            results.append(key_text)
        return results

    results = []
    for item in _iter_items(collection):
        key_text = candidate_key(item)
        if not _matches_prefix(key_text, prefix, ignore_case):
            continue
        if predicate is not None and not predicate(item):
            continue
        results.append(key_text)
    return results


def _iter_items(collection: Any) -> Iterable[Any]:
    # Sets have no natural order; sort them so expansion stays repeatable
    if isinstance(collection, (set, frozenset)):
        return sorted(collection, key=candidate_key)
    return collection
