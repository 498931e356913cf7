"""
Configuration Module

Client configuration settings.
"""

from saferpay.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
