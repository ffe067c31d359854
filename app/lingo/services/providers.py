"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from lingo.core.config import Settings
from lingo.i18n.factory import create_message_source
from lingo.i18n.service import MessageSource


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_message_source() -> MessageSource:
    """
    Get application-scoped message source singleton.

    Catalogs are loaded from the configured directory on first use when
    I18N_PRELOAD is enabled.

    Returns:
        MessageSource: Cached message source.

    Usage:
        @router.get("/greeting")
        def greeting(source: MessageSourceDep) -> dict:
            return {"text": source.get_message("common.welcome", args=["Ada"]).text}
    """
    return create_message_source(i18n_settings=get_settings().i18n)
