"""In-memory bookmark tree with observer-style events, a selection manager and a headless item model."""

__version__ = "0.1.0"