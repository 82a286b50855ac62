"""TrackSimulator — advances every track one tick along its polyline."""

from __future__ import annotations

import random

from mock_feed.geometry.models import PolylineFeatureSet
from mock_feed.simulation.ids import IdGenerator
from mock_feed.simulation.models import Observation, TrackRecord
from mock_feed.simulation.motion import heading, roll_active, segment, segment_length

TICKS_BETWEEN_ACTIVE_UPDATES = 400


class TrackSimulator:
    """Moves tracks piecewise-linearly along their polyline segments.

    Each tick a track advances by ``speed`` along its current segment.  When
    the *next* tick would reach or pass the segment end, the track moves on to
    the following segment, then to vertex 0 of the next path, and finally
    wraps around to path 0 of the same feature.  ``speed`` is recomputed from
    the new segment's length on every transition.

    Every :data:`TICKS_BETWEEN_ACTIVE_UPDATES` ticks the ``ACTIVE`` flag of
    every track is re-rolled.

    Parameters
    ----------
    records:
        Track state, index-aligned with *observations*.
    observations:
        Reported state, mutated in place.
    dist_step:
        Speed as a fraction of the segment length.
    id_generator:
        Source of fresh ``OBJECTID`` values.
    rng:
        Random source for the ``ACTIVE`` flag.
    """

    def __init__(
        self,
        records: list[TrackRecord],
        observations: list[Observation],
        dist_step: float,
        id_generator: IdGenerator,
        rng: random.Random,
    ) -> None:
        if len(records) != len(observations):
            raise ValueError("records and observations must be index-aligned")
        self._records = records
        self._observations = observations
        self._dist_step = dist_step
        self._ids = id_generator
        self._rng = rng
        self._ticks_since_active_update = 0
        self._tick_count = 0

    @property
    def tick_count(self) -> int:
        """Number of ticks run since construction."""
        return self._tick_count

    def tick(self, feature_set: PolylineFeatureSet) -> None:
        """Advance every track by one tick."""
        self._tick_count += 1
        self._ticks_since_active_update += 1
        refresh_active = self._ticks_since_active_update >= TICKS_BETWEEN_ACTIVE_UPDATES

        for record, observation in zip(self._records, self._observations):
            self._advance(feature_set, record, observation, refresh_active)

        if refresh_active:
            self._ticks_since_active_update = 0

    def _advance(
        self,
        feature_set: PolylineFeatureSet,
        record: TrackRecord,
        observation: Observation,
        refresh_active: bool,
    ) -> None:
        paths = feature_set.features[record.feature_index].geometry.paths
        path = paths[record.path_index]
        start, end = segment(path, record.vertex_index)

        distance = record.accumulated_distance + record.speed
        # Zero-length segments hold the track on their start vertex.
        ratio = distance / record.segment_length if record.segment_length > 0 else 0.0
        observation.geometry.x = start[0] + (end[0] - start[0]) * ratio
        observation.geometry.y = start[1] + (end[1] - start[1]) * ratio

        attributes = observation.attributes
        attributes["OBJECTID"] = self._ids.next_id()
        attributes["HEADING"] = heading(start, end)
        if refresh_active:
            attributes["ACTIVE"] = roll_active(self._rng)

        record.accumulated_distance = distance
        if distance + record.speed < record.segment_length:
            return

        vertex_index = record.vertex_index + 1
        path_index = record.path_index
        if vertex_index >= len(path) - 1:
            path_index = path_index + 1 if path_index < len(paths) - 1 else 0
            path = paths[path_index]
            vertex_index = 0

        start, end = segment(path, vertex_index)
        record.path_index = path_index
        record.vertex_index = vertex_index
        record.segment_length = segment_length(start, end)
        record.accumulated_distance = 0.0
        record.speed = record.segment_length * self._dist_step
