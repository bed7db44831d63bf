"""SilentSOS backend: SOS dispatch, nearby alerts and per-user safety settings."""

__version__ = "1.0.0"
