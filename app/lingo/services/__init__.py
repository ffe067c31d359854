"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from lingo.services.dependencies import MessageSourceDep, SettingsDep
from lingo.services.providers import get_message_source, get_settings

__all__ = [
    "SettingsDep",
    "MessageSourceDep",
    "get_settings",
    "get_message_source",
]
