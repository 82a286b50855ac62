"""Smoke test to verify the toolchain works."""


def test_import_mock_feed():
    """Verify the mock_feed package can be imported."""
    import mock_feed

    assert mock_feed is not None


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import mock_feed.geometry
    import mock_feed.simulation
    import mock_feed.web.app

    assert mock_feed.geometry is not None
    assert mock_feed.simulation is not None
    assert mock_feed.web.app is not None
