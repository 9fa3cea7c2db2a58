import pytest

from corekit.errors import CoreKitError, InvalidArgumentError
from corekit.char_array import CharArray, Uint8Array


def test_default_initialization():
    char_array = CharArray(0)
    assert char_array.capacity == 0
    assert char_array.length == 0


def test_resize():
    char_array = CharArray(5)
    char_array.memcpy(b"1234\0", 5)
    assert char_array.length == 5
    assert char_array.value == "1234"

    with pytest.raises(InvalidArgumentError):
        char_array.resize(0)
    assert char_array.capacity == 5
    assert char_array.length == 5

    char_array.resize(11)
    assert char_array.capacity == 11
    assert char_array.length == 5

    char_array.memcpy(b"0987654321\0", 11)
    assert char_array.length == 11
    assert char_array.value == "0987654321"

    char_array.resize(3)
    assert char_array.capacity == 3
    assert char_array.length == 3
    assert char_array.buffer[0:1] == b"0"
    assert char_array.buffer[1:2] == b"9"
    assert char_array.buffer[2:3] == b"8"


def test_negative_capacity_rejected():
    with pytest.raises(InvalidArgumentError):
        CharArray(-1)


def test_expand_as_needed_only_grows():
    char_array = CharArray(8)
    char_array.expand_as_needed(4)
    assert char_array.capacity == 8
    char_array.expand_as_needed(16)
    assert char_array.capacity == 16


def test_strcpy_round_trip():
    char_array = CharArray(0)
    char_array.strcpy("hello")
    assert char_array.value == "hello"
    assert char_array.length == len("hello") + 1
    assert char_array.capacity >= char_array.length


def test_strcat_appends():
    char_array = CharArray(0)
    char_array.strcpy("foo")
    char_array.strcat("bar")
    assert char_array.value == "foobar"
    assert char_array.length == len("foobar") + 1


def test_strncat_limits_bytes():
    char_array = CharArray(2)
    char_array.strcpy("foo")
    char_array.strncat("barbaz", 3)
    assert char_array.value == "foobar"
    char_array.strncat("!", 10)
    assert char_array.value == "foobar!"


def test_strcat_on_empty_array():
    char_array = CharArray(0)
    char_array.strcat("x")
    assert char_array.value == "x"


def test_sprintf_grows_buffer():
    char_array = CharArray(1)
    char_array.sprintf("%s-%d", "item", 42)
    assert char_array.value == "item-42"
    assert char_array.length == len("item-42") + 1
    char_array.sprintf("%s", "a")
    assert char_array.value == "a"


def test_sprintf_bad_arguments():
    char_array = CharArray(4)
    with pytest.raises(CoreKitError):
        char_array.sprintf("%d", "not a number")


def test_memcpy_beyond_source_rejected():
    char_array = CharArray(4)
    with pytest.raises(InvalidArgumentError):
        char_array.memcpy(b"ab", 3)


def test_uint8_array_resize():
    array = Uint8Array(4)
    array.buffer[:4] = bytes([1, 2, 3, 4])
    array.length = 4
    array.resize(8)
    assert array.capacity == 8
    assert bytes(array) == bytes([1, 2, 3, 4])
    array.resize(2)
    assert array.capacity == 2
    assert bytes(array) == bytes([1, 2])
    with pytest.raises(InvalidArgumentError):
        array.resize(0)
    assert array.capacity == 2


def test_uint8_array_length_bounded_by_capacity():
    array = Uint8Array(3)
    with pytest.raises(InvalidArgumentError):
        array.length = 4
    assert array.length == 0