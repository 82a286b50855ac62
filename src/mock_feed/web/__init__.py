"""FastAPI transport for the feed."""
