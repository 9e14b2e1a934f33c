"""Size arithmetic for growing arrays, with overflow checks.

Running out of room raises :class:`MemoryError`.
"""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_item_size(item_size: int) -> None:
    if item_size <= 0:
        raise ValueError(f"item size must be positive, not {item_size}")


def _word_bytes(size_max: int) -> int:
    return (size_max.bit_length() + 7) // 8


def checked_size(count: int, item_size: int, size_max: int = SIZE_MAX) -> int:
    """Return the byte size of ``count`` items of ``item_size`` bytes.

    Raise ``MemoryError`` if the size exceeds ``size_max``.
    """
    _check_item_size(item_size)
    if count < 0:
        raise ValueError(f"count must not be negative, not {count}")
    if size_max // item_size < count:
        raise MemoryError(f"{count} items of {item_size} bytes exceed {size_max}")
    return count * item_size


def grow_count(
    count: int,
    item_size: int,
    allocated: bool = False,
    size_max: int = SIZE_MAX,
) -> int:
    """Return the next item count for an array that must grow.

    Without an existing block, a zero ``count`` picks a small default
    that never comes to zero. With one, the count grows by about half,
    so repeated growth costs linear time. Raise ``MemoryError`` when the
    new size could exceed ``size_max``.
    """
    _check_item_size(item_size)
    if count < 0:
        raise ValueError(f"count must not be negative, not {count}")

    if not allocated:
        if count == 0:
            default_mxfast = 64 * _word_bytes(size_max) // 4
            count = default_mxfast // item_size or 1
    else:
        if size_max // 3 * 2 // item_size <= count:
            raise MemoryError(f"cannot grow {count} items of {item_size} bytes")
        count += (count + 1) // 2

    checked_size(count, item_size, size_max)
    return count