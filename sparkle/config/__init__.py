"""Settings for the enrichment engine."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
