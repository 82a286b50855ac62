"""Cycling 32-bit object identifiers."""

from __future__ import annotations

MAX_ID = 0xFFFFFFFE
"""Largest identifier handed out; the all-ones value is never reached."""


class IdGenerator:
    """Hands out 1, 2, 3, … and wraps back to 1 after :data:`MAX_ID`.

    Never returns 0.  Not thread-safe.
    """

    def __init__(self, start: int = 1) -> None:
        if not 1 <= start <= MAX_ID:
            raise ValueError(f"start must be in [1, {MAX_ID:#x}]")
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next = value + 1 if value < MAX_ID else 1
        return value
