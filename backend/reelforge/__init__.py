"""ReelForge: simulated live reel production pipeline streamed as NDJSON."""

__version__ = "0.1.0"
__author__ = "ReelForge Team"

__all__ = ["__version__", "__author__"]
