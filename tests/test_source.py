import pytest

from spigotloom.errors import AllocationError, DigitLimitError
from spigotloom.source import WallisArray


def test_array_sized_and_seeded_with_twos():
    a = WallisArray(15)
    assert len(a) == 51
    assert a.slots == [2] * 51


def test_first_raw_digit_is_three():
    a = WallisArray(5)
    assert a.next_raw() == 3


def test_iter_yields_one_raw_value_per_digit():
    raws = list(WallisArray(40))
    assert len(raws) == 40
    assert all(0 <= v <= 10 for v in raws)


def test_lookahead_adds_passes_and_slots():
    a = WallisArray(15, lookahead=3)
    assert a.passes == 18
    assert len(a) == 61
    assert len(list(a)) == 18


def test_slots_stay_within_radix_after_each_pass():
    a = WallisArray(60)
    for _ in range(60):
        a.next_raw()
        assert 0 <= a.slots[0] <= 9
        for i in range(1, len(a)):
            assert 0 <= a.slots[i] <= 2 * i


def test_array_never_resized():
    a = WallisArray(30)
    size = len(a)
    list(a)
    assert len(a.slots) == size


def test_boundary_array_limit():
    a = WallisArray(10, array_limit=34)
    assert len(a) == 34
    with pytest.raises(DigitLimitError):
        WallisArray(11, array_limit=34)


def test_allocation_failure_is_reported():
    with pytest.raises(AllocationError) as e:
        WallisArray(10**20, array_limit=10**30)
    assert e.value.size == 10**20 * 10 // 3 + 1
    assert "failed to allocate" in str(e.value)
