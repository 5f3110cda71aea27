from phpvm.collections import uniq_append


def test_appends_missing_item():
    assert uniq_append(["8.1"], "8.2") == ["8.1", "8.2"]


def test_keeps_existing_item_once():
    assert uniq_append(["8.1", "8.2"], "8.1") == ["8.1", "8.2"]


def test_empty_input():
    assert uniq_append([], "7.4") == ["7.4"]


def test_does_not_mutate_input():
    original = ["8.1"]
    result = uniq_append(original, "8.3")
    assert original == ["8.1"]
    assert result == ["8.1", "8.3"]


def test_accepts_any_iterable():
    assert uniq_append(("a", "b"), "b") == ["a", "b"]


def test_repeated_appends_are_idempotent():
    once = uniq_append(["x"], "y")
    twice = uniq_append(once, "y")
    assert once == twice