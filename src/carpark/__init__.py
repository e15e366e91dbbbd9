"""In-memory car park record manager."""

__version__ = "1.0.0"
