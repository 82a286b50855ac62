"""Simulation state and output data structures."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

FEATURE_RESULT_TYPE = "featureResult"


@dataclass
class TrackRecord:
    """Simulation state of one track.

    ``accumulated_distance`` stays below ``segment_length`` once a tick has
    resolved its segment transition.  The exception is a zero-length segment
    (repeated vertex), where both are 0; the following tick always leaves it.
    """

    feature_index: int
    """Index into the geometry feature sequence (fixed for the track's lifetime)."""

    path_index: int
    """Index into the feature's paths."""

    vertex_index: int
    """Start vertex of the current segment within the path."""

    segment_length: float
    """Euclidean length of the current segment."""

    accumulated_distance: float
    """Distance travelled along the current segment."""

    speed: float
    """Distance advanced per tick, ``segment_length * dist_step`` at segment entry."""


@dataclass
class PointGeometry:
    x: float
    y: float


@dataclass
class Observation:
    """Reported state of one track; mutated in place by the simulator only.

    ``attributes`` holds ``OBJECTID``, ``TRACKID``, ``HEADING``, ``TYPE`` and
    ``ACTIVE``.
    """

    attributes: dict[str, int | float]
    geometry: PointGeometry

    def snapshot(self) -> PointFeature:
        """Return a detached copy suitable for handing to consumers."""
        return PointFeature(
            attributes=dict(self.attributes),
            geometry=PointGeometry(self.geometry.x, self.geometry.y),
        )


@dataclass
class PointFeature:
    attributes: dict[str, int | float]
    geometry: PointGeometry


@dataclass
class FeatureResult:
    """One page of observations."""

    features: list[PointFeature] = field(default_factory=list)
    type: str = FEATURE_RESULT_TYPE

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict (recursive via :func:`dataclasses.asdict`)."""
        return {
            "type": self.type,
            "features": [dataclasses.asdict(f) for f in self.features],
        }
