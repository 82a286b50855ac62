"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mock_feed.web.app import app, reset_service


@pytest.fixture
def client(monkeypatch):
    """FastAPI test client with no feed loaded."""
    monkeypatch.delenv("MOCK_FEED_GEOMETRY", raising=False)
    reset_service()
    with TestClient(app) as c:
        yield c
    reset_service()


def make_feature_set_payload(n_vertices: int = 50) -> list[dict]:
    """One horizontal polyline with *n_vertices* vertices one unit apart."""
    return [
        {
            "attributes": {"NAME": "test road"},
            "geometry": {"paths": [[[float(i), 0.0] for i in range(n_vertices)]]},
        }
    ]
