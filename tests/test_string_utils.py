import pytest

from confscope.string_utils import (
    INVALID_FIELD,
    data_to_string,
    find_all_substrings,
    join_namespace,
    join_namespaces,
    print_center,
    prune_leading_whitespace,
    prune_trailing_whitespace,
    prune_whitespace,
    scalar_to_string,
    split_namespace,
    wrap_string,
)


@pytest.mark.parametrize("ns", ["a/b/c", "/a/b/c/", "a/b///c/"])
def test_split_namespace(ns):
    assert split_namespace(ns) == ["a", "b", "c"]


def test_split_empty_namespace():
    assert split_namespace("") == []


def test_join_namespaces_list():
    assert join_namespaces(["a", "b", "c"]) == "a/b/c"


@pytest.mark.parametrize(
    "ns1, ns2, expected",
    [
        ("a", "b/c", "a/b/c"),
        ("/a", "/b/c", "a/b/c"),
        ("a/b///", "//c/", "a/b/c"),
        ("", "", ""),
        ("a/b/c", "", "a/b/c"),
        ("", "a/b/c", "a/b/c"),
    ],
)
def test_join_namespace(ns1, ns2, expected):
    assert join_namespace(ns1, ns2) == expected


def test_join_namespace_custom_delimiter():
    assert join_namespace("a.b", ".c.", ".") == "a.b.c"


@pytest.mark.parametrize(
    "text, line",
    [
        (
            "Uninitialized Virtual Config",
            "========================= Uninitialized Virtual Config =========================",
        ),
        (
            "Virtual Config: Derived2",
            "=========================== Virtual Config: Derived2 ===========================",
        ),
        (
            "ObjectWithBase",
            "================================ ObjectWithBase ================================",
        ),
    ],
)
def test_print_center_matches_headers(text, line):
    assert print_center(text, 80, "=") == line


def test_print_center_long_text_not_truncated():
    text = "x" * 100
    assert print_center(text, 10, "*") == " " + text + " "


def test_find_all_substrings_overlapping():
    assert find_all_substrings("aaaa", "aa") == [0, 1, 2]
    assert find_all_substrings("abc", "z") == []


def test_prune_whitespace():
    assert prune_trailing_whitespace("  a b  ") == "  a b"
    assert prune_leading_whitespace("  a b  ") == "a b  "
    assert prune_whitespace("  a b  ") == "a b"
    assert prune_leading_whitespace("    ") == ""
    assert prune_trailing_whitespace("\tx\t") == "\tx\t"


def test_scalar_to_string_plain():
    assert scalar_to_string(True) == "true"
    assert scalar_to_string(7) == "7"
    assert scalar_to_string("text") == "text"


def test_scalar_to_string_reformats_float():
    assert scalar_to_string(3.14159, True) == "3.14159"
    assert scalar_to_string(0.1 + 0.2, True) == "0.3"
    assert scalar_to_string(0.1 + 0.2, False) == repr(0.1 + 0.2)


def test_scalar_to_string_unparseable_float_left_alone():
    assert scalar_to_string("v1.5x", True) == "v1.5x"


def test_data_to_string_nested():
    data = {"a": 1, "b": [1, 2], "c": {}}
    assert data_to_string(data) == "{a: 1, b: [1, 2], c: {}}"


def test_data_to_string_null_is_invalid():
    assert data_to_string(None) == INVALID_FIELD
    assert data_to_string([None]) == "[" + INVALID_FIELD + "]"


def test_wrap_string_breaks_lines():
    assert wrap_string("hello world", 5, 0, True) == "hello\nworld"


def test_wrap_string_lines_respect_width():
    text = "the quick brown fox jumps over the lazy dog " * 3
    wrapped = wrap_string(text, 20, 4, True)
    lines = wrapped.split("\n")
    assert all(len(line) <= 20 for line in lines)
    assert all(line.startswith("    ") for line in lines)
    assert "".join(line.strip() for line in lines).replace(" ", "") == text.replace(" ", "")


def test_wrap_string_without_first_indent():
    assert wrap_string("key: value", 80, 5, False) == "key: value"
    assert wrap_string("abc", 80, 5, False) == "abc"


def test_wrap_string_empty():
    assert wrap_string("", 80, 4, True) == ""