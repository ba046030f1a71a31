"""Persistence of print settings."""

from .store import GLOBAL_KEY, SettingsStore

__all__ = [
    "GLOBAL_KEY",
    "SettingsStore",
]
