# corekit

Small utilities for strings, growable byte buffers, a string-to-string map
with explicit capacity, process information and clock readings. It uses only
the standard library and is a library only; it installs no commands.

## Installation

```
pip install .
```

## Modules

### `corekit.strutil`

- `repl_str(text, old, new)`: replace every non-overlapping occurrence of
  `old`, left to right. An empty `old` raises `InvalidArgumentError`.
- `strdup(text)` and `strndup(text, length)`: return the text (or its first
  `length` characters); `None` in gives `None` out.
- `snprintf(buffer_size, fmt, *args)`: `%`-style formatting bounded like a C
  buffer. It returns a `FormattedText(text, length)` named tuple, where `text`
  holds at most `buffer_size - 1` characters and `length` is always the length
  of the full, untruncated result. A `buffer_size` of 0 only measures. A
  format that does not match its arguments raises `CoreKitError`.
- `split(text, delimiter)`: split on a single-character delimiter and drop
  every empty token. Empty text or `None` gives `[]`.
- `split_last(text, delimiter)`: split in two at the last inner delimiter.
  One leading and one trailing delimiter are ignored, and a delimiter directly
  before the split point is dropped. Without an inner delimiter the text is
  returned as a single item.

```python
from corekit.strutil import repl_str, snprintf, split, split_last

repl_str("foo/{bar}/baz", "{bar}", "bar")   # "foo/bar/baz"
snprintf(4, "%s", "0123456789")             # FormattedText(text="012", length=10)
split("/my//hello//world/", "/")            # ["my", "hello", "world"]
split_last("my/hello//world", "/")          # ["my/hello", "world"]
```

### `corekit.string_array`

`StringArray(items)` is a mutable sequence of strings in which a slot may be
`None` (empty). `StringArray.of_size(n)` makes `n` empty slots.
`compare(other)` returns -1, 0 or 1: elements are compared pairwise up to the
shorter length, then the shorter array sorts first. An empty slot among the
compared elements raises `CoreKitError`. The `<`, `>` and `==` operators
follow the same ordering.

### `corekit.char_array`

- `CharArray(capacity)`: a byte buffer holding a NUL-terminated string.
  `capacity`, `length` (settable, never above the capacity), `buffer` (the
  writable `bytearray`) and `value` (the text up to the first NUL) describe
  it. `resize(new_size)` sets the capacity and keeps what still fits;
  `expand_as_needed(new_size)` only grows. `sprintf`, `strcat`, `strncat`,
  `strcpy` and `memcpy` write into the buffer and grow it as needed.
- `Uint8Array(capacity)`: a plain resizable byte array with the same
  `capacity`, `length`, `buffer` and `resize`.

A `resize` to 0 raises `InvalidArgumentError` for both.

```python
from corekit.char_array import CharArray

buf = CharArray(0)
buf.strcpy("hello")
buf.strcat(", world")
buf.value      # "hello, world"
buf.length     # 13, counting the terminating NUL
```

### `corekit.string_map`

`StringMap(initial_capacity)` maps string keys to string values in a fixed
number of slots. `set` doubles the capacity when the map is full (from 0 it
goes to 1); `set_no_resize` raises `NotEnoughSpaceError` instead. `unset`
raises `KeyNotFoundError` for a missing key. `get` and `getn` return `None`
for a missing key; `key_existsn` and `getn` look at only the first
`key_length` characters of the key. `reserve(capacity)` never shrinks below
the current size, and `clear` keeps the capacity. `next_key(key)` walks the
keys in slot order, and `copy_to(destination)` sets every pair into another
map. The map also supports `len`, `in`, iteration, `items()` and item
access with `[]`.

```python
from corekit.string_map import StringMap

m = StringMap(1)
m.set("key1", "value1")
m.set("key2", "value2")  # capacity grows from 1 to 2
m.get("key1")            # "value1"
m.next_key(None)         # "key1"
m.next_key("key1")       # "key2"
```

### `corekit.process`

`get_pid()` returns the current process id. `get_executable_name()` returns
the file name of the path the running program was started as (for a Python
program, the interpreter, e.g. `python3`); on Windows the extension is
dropped. It returns `None` if the path is unknown.

### `corekit.timeutil`

`system_time_now()` returns wall-clock nanoseconds since the Unix epoch;
`steady_time_now()` returns a monotonic reading in nanoseconds. A negative
reading raises `CoreKitError`. `nanoseconds_string(t)` renders a signed
64-bit time point as a sign and at least 19 zero-padded digits;
`seconds_string(t)` renders it as a sign, 10 digits, a dot and 9 decimals,
without floating point.

```python
from corekit.timeutil import nanoseconds_string, seconds_string

nanoseconds_string(-5)             # "-0000000000000000005"
seconds_string(1_500_000_000)      # "0000000001.500000000"
```

### `corekit.errors`

`CoreKitError` is the base of every error raised here;
`InvalidArgumentError` (also a `ValueError`), `NotEnoughSpaceError` and
`KeyNotFoundError` (also a `KeyError`) derive from it. `ErrorState(message,
file, line_number)` is a frozen record whose `format()` returns
`"<message>, at <file>:<line_number>"`, the same text as
`format_error_string(message, file, line_number)`.

## What it does not do

Errors are raised as exceptions; there is no process-wide "last error" store
to set, read or reset, and `ErrorState` is only a record you build yourself.
There is no logging facility and no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```