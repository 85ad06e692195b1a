"""HTML rendering of network monitoring snapshots: formatting, markup helpers, and speed-test, path and alert sections."""

__version__ = "0.1.0"

__all__ = [
    "models",
    "formatting",
    "markup",
    "alerts_view",
    "speed_view",
    "paths_view",
]