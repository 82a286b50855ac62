"""Load polyline feature sets from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mock_feed.errors import GeometryError
from mock_feed.geometry.models import PolylineFeatureSet

_logger = logging.getLogger(__name__)


def load_feature_set(path: str | Path) -> PolylineFeatureSet:
    """Read an Esri-style polyline feature set from *path*.

    Raises:
        GeometryError: If the file is missing, is not JSON, or has the wrong shape.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise GeometryError(f"Geometry file not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise GeometryError(f"Geometry file is not valid JSON: {p}") from exc

    feature_set = PolylineFeatureSet.from_dict(data)
    _logger.info(
        "Loaded %d polyline features (%d vertices) from %s",
        len(feature_set.features),
        feature_set.vertex_count(),
        p,
    )
    return feature_set
