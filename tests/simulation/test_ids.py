"""IdGenerator — cycling nonzero 32-bit identifiers."""

from __future__ import annotations

import pytest

from mock_feed.simulation.ids import MAX_ID, IdGenerator


def test_starts_at_one_and_increments():
    ids = IdGenerator()
    assert [ids.next_id() for _ in range(3)] == [1, 2, 3]


def test_wraps_to_one_after_max():
    ids = IdGenerator(start=MAX_ID - 1)
    assert [ids.next_id() for _ in range(3)] == [MAX_ID - 1, MAX_ID, 1]


def test_never_reaches_all_ones_or_zero():
    assert MAX_ID < 0xFFFFFFFF
    ids = IdGenerator(start=MAX_ID)
    values = [ids.next_id() for _ in range(5)]
    assert 0 not in values
    assert all(0 < v <= MAX_ID for v in values)


@pytest.mark.parametrize("start", [0, MAX_ID + 1])
def test_invalid_start_raises(start):
    with pytest.raises(ValueError):
        IdGenerator(start=start)
