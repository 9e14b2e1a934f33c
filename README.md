# hellokit

Small building blocks for command-line programs. The package has four modules.

## `hellokit.errors`

`ErrorReporter` writes diagnostics in the form `program: message[: reason]`.

```python
import sys
from hellokit.errors import ErrorReporter

reporter = ErrorReporter("hello", stream=sys.stderr)
reporter.error(0, 2, "cannot open %s", "greeting.txt")
# hello: cannot open greeting.txt: No such file or directory
```

- `error(status, errnum, message, *args)` does three things in order:
  - It flushes the output stream. By default this is `sys.stdout`.
  - It writes the program name and `message % args`.
  - It writes the text for `errnum` when `errnum` is nonzero. That text comes from `errno_message(errnum)`, which falls back to `"Unknown system error"`.

  A nonzero `status` then raises `SystemExit(status)`.
- `error_at_line(status, errnum, file_name, line_number, message, *args)` puts `file:line: ` before the message. When `file_name` is `None`, it puts a single space there instead.
- Setting `one_per_line=True` skips a report that has the same file and line as the one just before it.
- If `print_progname` is a callable, it is called in place of writing the program name.
- `message_count` counts the messages written.
- The error stream defaults to `sys.stderr`.
- The program name defaults to `sys.argv[0]`.

## `hellokit.errnos`

- `errno_value(name)` returns the error number for a POSIX name such as `"EOVERFLOW"`.
  - The system's own value is used when it has one.
  - Otherwise a fixed stand-in value is used: values from 2000 up, or the native Windows values on Windows.
  - An unknown name raises `KeyError`.
- `is_fallback(name)` tells whether the stand-in was used.

## `hellokit.intprops`

`IntType(bits, signed=True)` describes a two's-complement integer type. It provides `minimum()` and `maximum()`.

Overflow checks follow C semantics, so division truncates toward zero:

- `add_range_overflow`, `subtract_range_overflow`, `negate_range_overflow`, `multiply_range_overflow`, `divide_range_overflow`, `remainder_range_overflow` and `left_shift_range_overflow` take explicit `minimum` and `maximum` bounds.
- `add_overflow`, `subtract_overflow`, `negate_overflow`, `multiply_overflow`, `divide_overflow`, `remainder_overflow` and `left_shift_overflow` take an `IntType`. Dividing by zero raises `ZeroDivisionError`.
- `int_bits_strlen_bound(bits)`, `int_strlen_bound(int_type)` and `int_bufsize_bound(int_type)` bound the length of a value's decimal text.

```python
from hellokit.intprops import IntType, add_overflow

int32 = IntType(32)
add_overflow(int32.maximum(), 1, int32)  # True
```

## `hellokit.growth`

- `grow_count(count, item_size, allocated=False, size_max=SIZE_MAX)` returns the next item count for a growing array.
  - If `allocated` is false and `count` is zero, it returns a small default that is never zero.
  - If `allocated` is true, it grows the count by about half.
- `checked_size(count, item_size, size_max=SIZE_MAX)` returns `count * item_size`.

Both functions raise `MemoryError` when the size would exceed `size_max`. They raise `ValueError` for a negative count or an item size that is not positive.

## What it does not do

hellokit is a library only. It has no command of its own and prints nothing unless a reporter is asked to.

## Running the tests

```
pip install -e .[test]
pytest
```