"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common dependencies.
"""

from typing import Annotated

from fastapi import Depends

from lingo.core.config import Settings
from lingo.i18n.service import MessageSource
from lingo.services.providers import get_message_source, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Message source dependency - one process-wide catalog store behind it
MessageSourceDep = Annotated[MessageSource, Depends(get_message_source)]

__all__ = [
    "SettingsDep",
    "MessageSourceDep",
]
