"""Segment geometry helpers shared by the allocator and the simulator."""

from __future__ import annotations

import math
import random

from mock_feed.geometry.models import Path, Vertex

ACTIVE_PROBABILITY = 0.05
MAX_TYPE = 5


def segment(path: Path, vertex_index: int) -> tuple[Vertex, Vertex]:
    """Return the start and end vertex of the segment starting at *vertex_index*."""
    return path[vertex_index], path[vertex_index + 1]


def segment_length(start: Vertex, end: Vertex) -> float:
    return math.hypot(end[0] - start[0], end[1] - start[1])


def heading(start: Vertex, end: Vertex) -> float:
    """Azimuth of the segment direction in radians, 0 pointing along +y."""
    return math.atan2(end[1] - start[1], end[0] - start[0]) - math.pi / 2


def roll_active(rng: random.Random) -> int:
    return 1 if rng.random() < ACTIVE_PROBABILITY else 0


def roll_type(rng: random.Random) -> int:
    return rng.randint(0, MAX_TYPE)
