"""Polyline geometry data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mock_feed.errors import GeometryError

Vertex = tuple[float, float]
Path = list[Vertex]


def _parse_vertex(raw: Any) -> Vertex:
    try:
        x, y = raw[0], raw[1]
        return float(x), float(y)
    except (IndexError, KeyError, TypeError, ValueError) as exc:
        raise GeometryError(f"Invalid vertex: {raw!r}") from exc


@dataclass
class Polyline:
    """An ordered sequence of paths; each path is an ordered list of vertices."""

    paths: list[Path]

    def vertex_count(self) -> int:
        """Total number of vertices across all paths."""
        return sum(len(path) for path in self.paths)

    @classmethod
    def from_dict(cls, data: dict) -> Polyline:
        """Parse ``{"paths": [[[x, y], ...], ...]}``."""
        if not isinstance(data, dict) or "paths" not in data:
            raise GeometryError("Polyline geometry requires a 'paths' member")
        raw_paths = data["paths"]
        if not isinstance(raw_paths, list):
            raise GeometryError("'paths' must be a list")
        paths: list[Path] = []
        for raw_path in raw_paths:
            if not isinstance(raw_path, list):
                raise GeometryError("Each path must be a list of vertices")
            paths.append([_parse_vertex(v) for v in raw_path])
        return cls(paths=paths)


@dataclass
class PolylineFeature:
    """A polyline geometry with its attribute mapping."""

    geometry: Polyline
    attributes: dict[str, str | float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> PolylineFeature:
        if not isinstance(data, dict) or "geometry" not in data:
            raise GeometryError("Feature requires a 'geometry' member")
        return cls(
            geometry=Polyline.from_dict(data["geometry"]),
            attributes=dict(data.get("attributes") or {}),
        )


@dataclass
class PolylineFeatureSet:
    """Ordered polyline features — the geometry the tracks travel along.

    Supplied once at initialization and treated as read-only afterwards.
    """

    features: list[PolylineFeature]

    def vertex_count(self) -> int:
        """Total number of vertices across all features."""
        return sum(f.geometry.vertex_count() for f in self.features)

    @classmethod
    def from_dict(cls, data: dict) -> PolylineFeatureSet:
        """Parse an Esri-style feature set.

        Raises:
            GeometryError: If the document does not have the expected shape.
        """
        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            raise GeometryError("Feature set requires a 'features' list")
        return cls(features=[PolylineFeature.from_dict(f) for f in data["features"]])

    @classmethod
    def from_paths(cls, *polylines: list[list[tuple[float, float]]]) -> PolylineFeatureSet:
        """Build a feature set with one feature per list of paths."""
        return cls(
            features=[
                PolylineFeature(
                    geometry=Polyline(
                        paths=[[(float(x), float(y)) for x, y in path] for path in paths]
                    )
                )
                for paths in polylines
            ]
        )
