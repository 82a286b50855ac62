"""Track allocation, per-tick simulation and paging.

Public API
----------
MockFeedService - initialize with geometry, then page through observations
TrackAllocator  - initial track placement
TrackSimulator  - per-tick position update
Pager           - fixed-size pages, one tick per cycle
IdGenerator     - cycling nonzero 32-bit identifiers
"""

from mock_feed.simulation.allocator import TrackAllocator
from mock_feed.simulation.ids import IdGenerator
from mock_feed.simulation.models import (
    FeatureResult,
    Observation,
    PointFeature,
    PointGeometry,
    TrackRecord,
)
from mock_feed.simulation.pager import Pager
from mock_feed.simulation.service import MockFeedService
from mock_feed.simulation.simulator import TrackSimulator

__all__ = [
    "FeatureResult",
    "IdGenerator",
    "MockFeedService",
    "Observation",
    "Pager",
    "PointFeature",
    "PointGeometry",
    "TrackAllocator",
    "TrackRecord",
    "TrackSimulator",
]
