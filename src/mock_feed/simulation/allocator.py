"""TrackAllocator — distributes tracks across polylines by vertex count."""

from __future__ import annotations

import logging
import math
import random

from mock_feed.config import FeedConfig
from mock_feed.errors import GeometryError
from mock_feed.geometry.models import Polyline, PolylineFeatureSet
from mock_feed.simulation.ids import IdGenerator
from mock_feed.simulation.models import Observation, PointGeometry, TrackRecord
from mock_feed.simulation.motion import (
    heading,
    roll_active,
    roll_type,
    segment,
    segment_length,
)

_logger = logging.getLogger(__name__)

SPACING_FACTOR = 0.8
"""Fraction of a feature's vertices over which its tracks are spread."""


class TrackAllocator:
    """Place the initial tracks on the geometry.

    Algorithm:
    1. Each feature receives ``max(1, floor(T * feature_vertices / total_vertices))``
       tracks, where ``T`` is ``config.tracked_assets``.
    2. Within a feature, tracks start ``floor(0.8 * feature_vertices / n)``
       vertices apart, rolling over to vertex 0 of the next path when the
       current path runs out.
    3. A feature stops receiving tracks early when its paths run out;
       placement stops altogether once ``T`` tracks exist.

    Running out of features before ``T`` is reached is logged, not raised.

    Parameters
    ----------
    config:
        Feed configuration (target track count and ``dist_step``).
    id_generator:
        Source of ``OBJECTID`` values.
    rng:
        Random source for ``TYPE`` and ``ACTIVE``.
    """

    def __init__(
        self,
        config: FeedConfig,
        id_generator: IdGenerator,
        rng: random.Random,
    ) -> None:
        self._config = config
        self._ids = id_generator
        self._rng = rng

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def allocate(
        self, feature_set: PolylineFeatureSet
    ) -> tuple[list[TrackRecord], list[Observation]]:
        """Create index-aligned track records and observations.

        Raises
        ------
        GeometryError
            If the feature set has no vertices, a feature has no paths, or a
            feature receiving tracks has a path with fewer than 2 vertices.
        """
        target = self._config.tracked_assets
        vertex_sum = feature_set.vertex_count()
        if vertex_sum == 0:
            raise GeometryError("Feature set contains no vertices")

        records: list[TrackRecord] = []
        observations: list[Observation] = []

        for feature_index, feature in enumerate(feature_set.features):
            if len(records) >= target:
                break
            self._allocate_feature(
                feature_index, feature.geometry, vertex_sum, records, observations
            )

        if len(records) < target:
            _logger.warning(
                "Geometry exhausted after %d features: placed %d of %d tracks",
                len(feature_set.features),
                len(records),
                target,
            )
        return records, observations

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _allocate_feature(
        self,
        feature_index: int,
        polyline: Polyline,
        vertex_sum: int,
        records: list[TrackRecord],
        observations: list[Observation],
    ) -> None:
        if not polyline.paths:
            raise GeometryError(f"Feature {feature_index} has no paths")
        for i, path in enumerate(polyline.paths):
            if len(path) < 2:
                raise GeometryError(
                    f"Feature {feature_index} path {i} has fewer than 2 vertices"
                )

        target = self._config.tracked_assets
        vertex_count = polyline.vertex_count()
        tracks_for_feature = max(1, math.floor(target * vertex_count / vertex_sum))
        spacing = math.floor(SPACING_FACTOR * vertex_count / tracks_for_feature)

        path_index = 0
        vertex_index = 0
        for _ in range(tracks_for_feature):
            if len(records) >= target:
                return
            path = polyline.paths[path_index]
            start, end = segment(path, vertex_index)
            length = segment_length(start, end)
            records.append(
                TrackRecord(
                    feature_index=feature_index,
                    path_index=path_index,
                    vertex_index=vertex_index,
                    segment_length=length,
                    accumulated_distance=0.0,
                    speed=length * self._config.dist_step,
                )
            )
            observations.append(
                Observation(
                    attributes={
                        "OBJECTID": self._ids.next_id(),
                        "TRACKID": len(observations),
                        "HEADING": heading(start, end),
                        "TYPE": roll_type(self._rng),
                        "ACTIVE": roll_active(self._rng),
                    },
                    geometry=PointGeometry(start[0], start[1]),
                )
            )

            next_start = _next_track_start(polyline, spacing, path_index, vertex_index)
            if next_start is None:
                return
            path_index, vertex_index = next_start


def _next_track_start(
    polyline: Polyline, spacing: int, path_index: int, vertex_index: int
) -> tuple[int, int] | None:
    """Return ``(path_index, vertex_index)`` of the next placement, or None."""
    path = polyline.paths[path_index]
    if vertex_index + spacing < len(path) - 1:
        return path_index, vertex_index + spacing

    path_index += 1
    if path_index >= len(polyline.paths):
        return None
    return path_index, 0
