"""Feed configuration.

Defaults can be overridden from a partial mapping (camelCase wire names or
snake_case field names) or from ``MOCK_FEED_*`` environment variables.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

_WIRE_NAMES = {
    "trackedAssets": "tracked_assets",
    "pageSize": "page_size",
    "distStep": "dist_step",
}

_ENV_NAMES = {
    "MOCK_FEED_TRACKED_ASSETS": ("tracked_assets", int),
    "MOCK_FEED_PAGE_SIZE": ("page_size", int),
    "MOCK_FEED_DIST_STEP": ("dist_step", float),
}


@dataclass(frozen=True)
class FeedConfig:
    """Simulation parameters.

    Args:
        tracked_assets: Target number of tracks to place.
        page_size: Number of observations returned per page.
        dist_step: Speed as a fraction of the current segment length per tick.
    """

    tracked_assets: int = 10000
    page_size: int = 10000
    dist_step: float = 0.02

    def __post_init__(self) -> None:
        for name in ("tracked_assets", "page_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if isinstance(self.dist_step, bool) or not isinstance(self.dist_step, (int, float)):
            raise ValueError(f"dist_step must be a number, got {self.dist_step!r}")
        if self.tracked_assets < 1:
            raise ValueError("tracked_assets must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.dist_step <= 0:
            raise ValueError("dist_step must be > 0")

    @classmethod
    def from_partial(cls, overrides: Mapping[str, Any] | None = None) -> FeedConfig:
        """Merge *overrides* onto the defaults.

        Keys may be field names or their camelCase wire names.  ``None`` values
        are ignored.

        Raises:
            ValueError: On an unknown key or an out-of-range value.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (overrides or {}).items():
            name = _WIRE_NAMES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown config key: {key!r}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FeedConfig:
        """Build a config from ``MOCK_FEED_*`` variables (``.env`` is honoured)."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        kwargs: dict[str, Any] = {}
        for var, (name, convert) in _ENV_NAMES.items():
            raw = environ.get(var)
            if raw:
                kwargs[name] = convert(raw)
        return cls(**kwargs)
