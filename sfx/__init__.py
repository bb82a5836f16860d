"""Random per-event sound effects for console host lifecycle events."""

__version__ = "1.0.0"
