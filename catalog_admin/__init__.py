"""Product catalog admin: in-memory catalog editing with API/file persistence."""

__version__ = "1.0.0"
