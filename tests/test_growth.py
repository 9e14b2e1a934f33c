import pytest

from hellokit.growth import SIZE_MAX, checked_size, grow_count

SIZE_MAX_64 = 2**64 - 1


def test_initial_count_for_bytes_on_64_bit():
    assert grow_count(0, 1, size_max=SIZE_MAX_64) == 128


def test_initial_count_never_zero_for_large_items():
    assert grow_count(0, 1000, size_max=SIZE_MAX_64) == 1


def test_initial_count_scales_with_item_size():
    small = grow_count(0, 1, size_max=SIZE_MAX_64)
    assert grow_count(0, 4, size_max=SIZE_MAX_64) * 4 == small


def test_unallocated_nonzero_count_kept():
    assert grow_count(1000, 8) == 1000


def test_growth_makes_progress_from_one():
    assert grow_count(1, 8, allocated=True) > 1


@pytest.mark.parametrize("count", [1, 2, 3, 10, 99, 1000, 123457])
def test_growth_by_about_half(count):
    grown = grow_count(count, 4, allocated=True)
    assert grown > count
    assert 2 * grown >= 3 * count
    assert 2 * grown <= 3 * count + 1


def test_repeated_growth_is_monotonic():
    counts = [grow_count(0, 16)]
    for _ in range(20):
        counts.append(grow_count(counts[-1], 16, allocated=True))
    assert counts == sorted(set(counts))


def test_growth_small_size_max_raises():
    with pytest.raises(MemoryError):
        grow_count(100, 1, allocated=True, size_max=120)


def test_bad_item_size_rejected():
    with pytest.raises(ValueError):
        grow_count(0, 0)
    with pytest.raises(ValueError):
        checked_size(3, -1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        checked_size(-1, 4)
    with pytest.raises(ValueError):
        grow_count(-5, 4, allocated=True)


def test_checked_size_boundary():
    assert checked_size(SIZE_MAX // 2, 2) <= SIZE_MAX
    with pytest.raises(MemoryError):
        checked_size(SIZE_MAX // 2 + 1, 2)


def test_checked_size_is_product():
    for count, size in [(0, 7), (3, 4), (1000, 1)]:
        assert checked_size(count, size) // size == count


def test_checked_size_respects_custom_limit():
    assert checked_size(10, 10, size_max=100) == 100
    with pytest.raises(MemoryError):
        checked_size(11, 10, size_max=100)