import pytest

from corekit.errors import CoreKitError, InvalidArgumentError
from corekit.strutil import (
    repl_str,
    snprintf,
    split,
    split_last,
    strdup,
    strndup,
)


@pytest.mark.parametrize(
    "replacement, expected",
    [
        ("bbarr", "foo/bbarr/baz"),
        ("bar", "foo/bar/baz"),
        ("barbar", "foo/barbar/baz"),
        ("", "foo//baz"),
    ],
)
def test_repl_str_nominal(replacement, expected):
    assert repl_str("foo/{bar}/baz", "{bar}", replacement) == expected


def test_repl_str_no_match_returns_same_text():
    assert repl_str("foo/bar/baz", "{bar}", "x") == "foo/bar/baz"


def test_repl_str_empty_pattern_rejected():
    with pytest.raises(InvalidArgumentError):
        repl_str("abc", "", "x")


def test_strdup():
    assert strdup("hello") == "hello"
    assert strdup(None) is None


def test_strndup():
    assert strndup("hello", 3) == "hel"
    assert strndup("hello", 0) == ""
    assert strndup(None, 3) is None
    with pytest.raises(InvalidArgumentError):
        strndup("hello", -1)


TEST_STR = "0123456789"


def test_snprintf_full_buffer():
    result = snprintf(256, "%s", TEST_STR)
    assert result.length == len(TEST_STR)
    assert result.text == TEST_STR


def test_snprintf_measure_only():
    assert snprintf(0, "%s", TEST_STR).length == len(TEST_STR)


@pytest.mark.parametrize("size, expected", [(4, "012"), (1, ""), (2, "0")])
def test_snprintf_truncates(size, expected):
    result = snprintf(size, "%s", TEST_STR)
    assert result.length == len(TEST_STR)
    assert result.text == expected


def test_snprintf_invalid_arguments():
    with pytest.raises(InvalidArgumentError):
        snprintf(10, None, TEST_STR)
    with pytest.raises(InvalidArgumentError):
        snprintf(-1, "%s", TEST_STR)


def test_snprintf_bad_format_raises():
    with pytest.raises(CoreKitError):
        snprintf(10, "%d", "not a number")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (None, []),
        ("hello_world", ["hello_world"]),
        ("hello/world", ["hello", "world"]),
        ("/hello/world", ["hello", "world"]),
        ("hello/world/", ["hello", "world"]),
        ("hello//world", ["hello", "world"]),
        ("/hello//world", ["hello", "world"]),
        ("my/hello/world", ["my", "hello", "world"]),
        ("/my/hello/world", ["my", "hello", "world"]),
        ("/my/hello/world/", ["my", "hello", "world"]),
        ("/my//hello//world/", ["my", "hello", "world"]),
    ],
)
def test_split(text, expected):
    tokens = split(text, "/")
    assert tokens == expected
    assert all(tokens)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (None, []),
        ("hello_world", ["hello_world"]),
        ("hello/world", ["hello", "world"]),
        ("/hello/world", ["hello", "world"]),
        ("hello/world/", ["hello", "world"]),
        ("hello//world/", ["hello", "world"]),
        ("/hello//world", ["hello", "world"]),
        ("my/hello//world", ["my/hello", "world"]),
        ("/my/hello//world/", ["my/hello", "world"]),
    ],
)
def test_split_last(text, expected):
    tokens = split_last(text, "/")
    assert tokens == expected
    assert all(tokens)


def test_split_bad_delimiter():
    with pytest.raises(InvalidArgumentError):
        split("a/b", "//")
    with pytest.raises(InvalidArgumentError):
        split_last("a/b", "")


def test_split_round_trip_on_simple_paths():
    parts = ["alpha", "beta", "gamma"]
    assert split("/".join(parts), "/") == parts
    assert split_last("/".join(parts), "/") == ["alpha/beta", "gamma"]