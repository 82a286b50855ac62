"""Input polyline geometry.

Public API
----------
Polyline            - ordered paths of (x, y) vertices
PolylineFeature     - polyline plus attributes
PolylineFeatureSet  - ordered features, the feed's geometry input
load_feature_set    - read a feature set from a JSON file
"""

from mock_feed.geometry.loader import load_feature_set
from mock_feed.geometry.models import Polyline, PolylineFeature, PolylineFeatureSet

__all__ = ["Polyline", "PolylineFeature", "PolylineFeatureSet", "load_feature_set"]
