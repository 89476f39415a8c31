"""Config package exports."""

from .toggles import AllowedLogLevel, Settings, get_settings

__all__ = [
    "Settings",
    "AllowedLogLevel",
    "get_settings",
]
