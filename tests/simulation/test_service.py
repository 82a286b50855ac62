"""MockFeedService — initialization, paging and re-initialization."""

from __future__ import annotations

import random

import pytest

from mock_feed.config import FeedConfig
from mock_feed.errors import GeometryError, NotInitializedError
from mock_feed.geometry.models import PolylineFeatureSet
from mock_feed.simulation.models import FeatureResult
from mock_feed.simulation.service import MockFeedService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _line(n: int, y: float = 0.0) -> list[tuple[float, float]]:
    return [(float(i), y) for i in range(n)]


def _service(tracked_assets: int, page_size: int, dist_step: float = 0.02, seed: int = 0):
    config = FeedConfig(tracked_assets=tracked_assets, page_size=page_size, dist_step=dist_step)
    return MockFeedService(config, rng=random.Random(seed))


def _positions(result: FeatureResult) -> list[tuple[float, float]]:
    return [(f.geometry.x, f.geometry.y) for f in result.features]


def _track_ids(result: FeatureResult) -> list[int]:
    return [f.attributes["TRACKID"] for f in result.features]


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------


def test_next_before_initialize_raises():
    service = MockFeedService()
    assert not service.is_initialized
    with pytest.raises(NotInitializedError):
        service.next()


def test_malformed_geometry_fails_fast():
    service = _service(tracked_assets=1, page_size=1)
    with pytest.raises(GeometryError):
        service.initialize(PolylineFeatureSet.from_paths([[(0.0, 0.0)]]))
    assert not service.is_initialized


def test_short_trailing_path_rejected_at_initialize():
    service = _service(tracked_assets=1, page_size=1, dist_step=0.5)
    with pytest.raises(GeometryError):
        service.initialize(PolylineFeatureSet.from_paths([[(0, 0), (1, 0), (2, 0)], [(9, 9)]]))
    assert not service.is_initialized
    with pytest.raises(NotInitializedError):
        service.next()


def test_paging_across_path_ends_keeps_working():
    service = _service(tracked_assets=1, page_size=1, dist_step=0.5)
    service.initialize(PolylineFeatureSet.from_paths([[(0, 0), (1, 0), (2, 0)], [(9, 9), (9, 10)]]))

    for _ in range(8):
        service.next()

    assert service.tick_count == 8
    assert service.records[0].path_index in (0, 1)


# ---------------------------------------------------------------------------
# Cycle consistency
# ---------------------------------------------------------------------------


class TestCycle:
    def _initialized(self) -> MockFeedService:
        service = _service(tracked_assets=25, page_size=10)
        service.initialize(PolylineFeatureSet.from_paths([_line(50)]))
        return service

    def test_pages_return_consecutive_tracks(self):
        service = self._initialized()
        assert service.track_count == 25

        pages = [service.next() for _ in range(3)]

        assert _track_ids(pages[0]) == list(range(10))
        assert _track_ids(pages[1]) == list(range(10, 20))
        assert _track_ids(pages[2]) == list(range(20, 25))

    def test_one_tick_per_cycle(self):
        service = self._initialized()

        pages = [service.next() for _ in range(3)]
        assert service.tick_count == 1

        # every track starts on vertex (i, 0) of a unit segment, speed 0.02
        positions = [p for page in pages for p in _positions(page)]
        assert [x for x, _ in positions] == pytest.approx([i + 0.02 for i in range(25)])
        assert all(y == 0.0 for _, y in positions)

        service.next()
        assert service.tick_count == 2

    def test_pages_match_current_observations(self):
        service = self._initialized()
        pages = [service.next() for _ in range(3)]

        current = [(o.geometry.x, o.geometry.y) for o in service.observations]
        assert [p for page in pages for p in _positions(page)] == current

    def test_result_is_detached_from_simulation_state(self):
        service = self._initialized()
        result = service.next()

        result.features[0].geometry.x = 999.0
        result.features[0].attributes["TYPE"] = 42

        assert service.observations[0].geometry.x != 999.0
        assert service.observations[0].attributes["TYPE"] != 42


def test_reduced_track_count_drives_paging():
    service = _service(tracked_assets=10, page_size=5)
    service.initialize(PolylineFeatureSet.from_paths([_line(4)], [_line(4, 1.0)], [_line(4, 2.0)]))
    assert service.track_count == 9

    sizes = [len(service.next().features) for _ in range(3)]

    assert sizes == [5, 4, 5]
    assert service.tick_count == 2


def test_to_dict_shape():
    service = _service(tracked_assets=1, page_size=1, dist_step=0.5)
    service.initialize(PolylineFeatureSet.from_paths([[(0, 0), (1, 0), (1, 1)]]))

    data = service.next().to_dict()

    assert data["type"] == "featureResult"
    assert len(data["features"]) == 1
    feature = data["features"][0]
    assert feature["geometry"] == pytest.approx({"x": 0.5, "y": 0.0})
    assert set(feature["attributes"]) == {"OBJECTID", "TRACKID", "HEADING", "TYPE", "ACTIVE"}


def test_seeded_services_are_deterministic():
    fs = PolylineFeatureSet.from_paths([_line(100)])
    results = []
    for _ in range(2):
        service = _service(tracked_assets=20, page_size=20, seed=123)
        service.initialize(fs)
        results.append(service.next().to_dict())
    assert results[0] == results[1]


# ---------------------------------------------------------------------------
# Re-initialization
# ---------------------------------------------------------------------------


def test_reinitialize_discards_previous_state():
    service = _service(tracked_assets=25, page_size=10)
    service.initialize(PolylineFeatureSet.from_paths([_line(50)]))
    service.next()
    service.next()

    service.initialize(PolylineFeatureSet.from_paths([_line(30, y=5.0)]))

    assert service.tick_count == 0
    assert service.track_count == 25
    result = service.next()
    assert _track_ids(result) == list(range(10))
    assert all(y == 5.0 for _, y in _positions(result))
    assert service.tick_count == 1


def test_records_and_observations_stay_aligned():
    service = _service(tracked_assets=12, page_size=4)
    service.initialize(PolylineFeatureSet.from_paths([_line(20)], [_line(20, y=3.0)]))

    for _ in range(30):
        service.next()

    fs_y = {0: 0.0, 1: 3.0}
    for i, (record, obs) in enumerate(zip(service.records, service.observations)):
        assert obs.attributes["TRACKID"] == i
        assert obs.geometry.y == fs_y[record.feature_index]
