"""mock_feed — synthetic tracked-asset feed moving points along polylines."""

__version__ = "0.1.0"
