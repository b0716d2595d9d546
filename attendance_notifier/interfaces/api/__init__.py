"""HTTP API exposed with FastAPI."""
