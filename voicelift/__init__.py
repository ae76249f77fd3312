"""VoiceLift: workout log models, statistics and HTTP API."""

__version__ = "0.1.0"
