"""Pager — fixed-size pages over the observations, one tick per cycle."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


class Pager:
    """Slices a sequence into pages of *page_size* items.

    A cycle is one pass over all pages.  ``on_cycle_start`` is invoked before
    the first page of every cycle is read, so all pages of a cycle observe the
    same simulation tick.
    """

    def __init__(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.page_size = page_size
        self._page = 0

    @property
    def page(self) -> int:
        """Index of the page the next request will return."""
        return self._page

    def reset(self) -> None:
        self._page = 0

    def next_page(self, items: Sequence[T], on_cycle_start: Callable[[], None]) -> list[T]:
        count = len(items)
        start = self._page * self.page_size
        end = min(start + self.page_size, count)

        if start == 0:
            on_cycle_start()
        page = list(items[start:end])

        if (self._page + 1) * self.page_size >= count:
            self._page = 0
        else:
            self._page += 1
        return page
