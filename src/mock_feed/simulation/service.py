"""MockFeedService — initialize once, then request successive pages."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from mock_feed.config import FeedConfig
from mock_feed.errors import NotInitializedError
from mock_feed.geometry.models import PolylineFeatureSet
from mock_feed.simulation.allocator import TrackAllocator
from mock_feed.simulation.ids import IdGenerator
from mock_feed.simulation.models import FeatureResult, Observation, TrackRecord
from mock_feed.simulation.pager import Pager
from mock_feed.simulation.simulator import TrackSimulator

_logger = logging.getLogger(__name__)


class MockFeedService:
    """Synthetic tracked-asset feed moving points along polylines.

    Calls must be strictly sequential; the service does no locking of its own.

    Parameters
    ----------
    config:
        Feed configuration.  Defaults to :class:`FeedConfig` defaults.
    rng:
        Random source for ``TYPE``/``ACTIVE``.  Inject a seeded
        :class:`random.Random` for deterministic output.
    id_generator:
        ``OBJECTID`` source, shared by allocation and simulation.
    """

    def __init__(
        self,
        config: FeedConfig | None = None,
        rng: random.Random | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._config = config or FeedConfig()
        self._rng = rng or random.Random()
        self._ids = id_generator or IdGenerator()
        self._pager = Pager(self._config.page_size)
        self._feature_set: PolylineFeatureSet | None = None
        self._simulator: TrackSimulator | None = None
        self._records: list[TrackRecord] = []
        self._observations: list[Observation] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def config(self) -> FeedConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._simulator is not None

    @property
    def track_count(self) -> int:
        return len(self._records)

    @property
    def tick_count(self) -> int:
        return self._simulator.tick_count if self._simulator is not None else 0

    @property
    def records(self) -> Sequence[TrackRecord]:
        return tuple(self._records)

    @property
    def observations(self) -> Sequence[Observation]:
        return tuple(self._observations)

    def initialize(self, feature_set: PolylineFeatureSet) -> None:
        """Place all tracks on *feature_set*, discarding any previous state.

        Raises
        ------
        GeometryError
            If the geometry cannot carry tracks.
        """
        allocator = TrackAllocator(self._config, self._ids, self._rng)
        records, observations = allocator.allocate(feature_set)

        self._feature_set = feature_set
        self._records = records
        self._observations = observations
        self._simulator = TrackSimulator(
            records, observations, self._config.dist_step, self._ids, self._rng
        )
        self._pager.reset()
        _logger.info(
            "Initialized %d tracks on %d features", len(records), len(feature_set.features)
        )

    def next(self) -> FeatureResult:
        """Return the next page of observations.

        The first page of every cycle advances the simulation by one tick.

        Raises
        ------
        NotInitializedError
            If :meth:`initialize` has not been called.
        """
        if self._simulator is None or self._feature_set is None:
            raise NotInitializedError("initialize() must be called before next()")

        simulator = self._simulator
        feature_set = self._feature_set
        page = self._pager.next_page(
            self._observations, lambda: simulator.tick(feature_set)
        )
        return FeatureResult(features=[obs.snapshot() for obs in page])
