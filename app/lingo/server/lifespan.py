from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from lingo.core.logging import get_module_logger
from lingo.services import get_message_source, get_settings

logger = get_module_logger()


def _list_configs() -> None:
    settings = get_settings()
    logger.info(
        "configuration_loaded",
        prefix=settings.PREFIX,
        log_level=settings.LOG_LEVEL,
        catalog_dir=str(settings.i18n.CATALOG_DIR),
        default_language=settings.i18n.DEFAULT_LANGUAGE,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the process-wide message source before serving requests."""
    logger.info("application_startup")
    _list_configs()
    source = get_message_source()
    logger.info(
        "message_source_ready",
        version=source.version,
        locales=[str(locale) for locale in source.available_locales()],
    )
    yield
    logger.info("application_shutdown")
