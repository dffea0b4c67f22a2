"""Test candidate expansion for the supported collection shapes."""

from fuzzy_completing_read.candidates import (
    all_completions,
    candidate_key,
    is_dynamic_collection,
    is_one_shot_collection,
)


def test_string_list_keeps_order_and_duplicates():
    """Test that plain lists expand in order with duplicates kept."""
    collection = ["beta", "alpha", "beta", "gamma"]
    assert all_completions("", collection) == ["beta", "alpha", "beta", "gamma"]


def test_prefix_filtering():
    """Test that only candidates starting with the prefix are returned."""
    collection = ["apple", "apricot", "banana", "Apex"]
    assert all_completions("ap", collection) == ["apple", "apricot"]
    assert all_completions("ap", collection, ignore_case=True) == ["apple", "apricot", "Apex"]


def test_predicate_on_string_list():
    """Test that the predicate receives each string."""
    collection = ["one", "two", "three", "four"]
    assert all_completions("", collection, lambda s: len(s) == 3) == ["one", "two"]


def test_alist_uses_first_element_as_key():
    """Test that sequences of sequences complete on their first element."""
    collection = [("red", 1), ("green", 2), ["blue", 3]]
    seen = []

    def predicate(item):
        seen.append(item)
        return item[1] != 2

    assert all_completions("", collection, predicate) == ["red", "blue"]
    # The predicate sees whole items
    assert seen == [("red", 1), ("green", 2), ["blue", 3]]


def test_dict_predicate_receives_key_and_value():
    """Test that dict predicates are called with key and value."""
    collection = {"alpha": 1, "beta": 2, "gamma": 3}
    assert all_completions("", collection, lambda key, value: value % 2 == 1) == ["alpha", "gamma"]


def test_non_string_atoms_are_converted():
    """Test that non-string items become strings."""
    assert all_completions("", [1, 2, 3]) == ["1", "2", "3"]
    assert candidate_key(("x",)) == "x"
    assert candidate_key(()) == ""


def test_completion_function_is_called():
    """Test that completion functions are called with prefix, predicate and True."""
    calls = []

    def complete(prefix, predicate, flag):
        calls.append((prefix, predicate, flag))
        return ["dyn-" + prefix]

    assert all_completions("a", complete) == ["dyn-a"]
    assert calls == [("a", None, True)]


def test_dynamic_collection_detection():
    """Test which collections count as completion functions."""
    assert is_dynamic_collection(lambda s, p, f: [])
    assert not is_dynamic_collection(["a"])
    assert not is_dynamic_collection({"a": 1})


def test_expansion_is_repeatable():
    """Test that expanding the same collection twice gives the same result."""
    collection = {"b", "a", "c"}
    predicate = lambda s: s != "c"
    first = all_completions("", collection, predicate)
    second = all_completions("", collection, predicate)
    assert first == second == ["a", "b"]


def test_none_collection():
    """Test that a missing collection has no candidates."""
    assert all_completions("", None) == []


def test_one_shot_collection_detection():
    """Test that iterators are told apart from reusable collections."""
    assert is_one_shot_collection(c for c in ["a"])
    assert is_one_shot_collection(iter(["a"]))
    assert not is_one_shot_collection(["a"])
    assert not is_one_shot_collection({"a": 1})
    assert not is_one_shot_collection(lambda s, p, f: [])
