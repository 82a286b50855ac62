"""Pager — page slicing and one tick per cycle."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mock_feed.simulation.pager import Pager


def test_pages_cover_all_items_in_order():
    items = list(range(25))
    pager = Pager(page_size=10)
    tick = MagicMock()

    pages = [pager.next_page(items, tick) for _ in range(3)]

    assert pages == [list(range(10)), list(range(10, 20)), list(range(20, 25))]


def test_callback_runs_once_per_cycle():
    items = list(range(25))
    pager = Pager(page_size=10)
    tick = MagicMock()

    for _ in range(3):
        pager.next_page(items, tick)
    assert tick.call_count == 1

    pager.next_page(items, tick)
    assert tick.call_count == 2


def test_callback_runs_before_first_page_is_read():
    items = [0, 0, 0]
    pager = Pager(page_size=2)

    def bump():
        items[:] = [1, 1, 1]

    assert pager.next_page(items, bump) == [1, 1]


def test_wraps_after_exact_multiple():
    items = list(range(20))
    pager = Pager(page_size=10)
    tick = MagicMock()

    pager.next_page(items, tick)
    assert pager.page == 1
    pager.next_page(items, tick)
    assert pager.page == 0
    assert pager.next_page(items, tick) == list(range(10))
    assert tick.call_count == 2


def test_page_larger_than_items_ticks_every_request():
    items = list(range(5))
    pager = Pager(page_size=10)
    tick = MagicMock()

    for _ in range(4):
        assert pager.next_page(items, tick) == items
    assert tick.call_count == 4


def test_reset_restarts_cycle():
    items = list(range(25))
    pager = Pager(page_size=10)
    tick = MagicMock()
    pager.next_page(items, tick)

    pager.reset()

    assert pager.next_page(items, tick) == list(range(10))
    assert tick.call_count == 2


def test_invalid_page_size():
    with pytest.raises(ValueError):
        Pager(page_size=0)
