"""Audio package."""

from .sounds import AlarmPlayer

__all__ = ["AlarmPlayer"]
