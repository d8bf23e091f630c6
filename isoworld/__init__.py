"""Game flow, camera, UI state and session logging for an isometric world game."""

__version__ = "0.1.0"