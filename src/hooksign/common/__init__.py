"""Common utilities for hooksign."""

from hooksign.common.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
