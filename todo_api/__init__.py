"""In-memory todo resource server."""

__version__ = "1.0.0"
