"""Factory functions for creating i18n components.

Provides a convenience function for building a MessageSource from the
application settings.
"""

from pathlib import Path
from typing import Optional

from lingo.core.config import I18nSettings
from lingo.core.logging import get_module_logger
from lingo.i18n.loader import YAMLCatalogLoader
from lingo.i18n.service import MessageSource

logger = get_module_logger()


def create_message_source(
    catalog_dir: Optional[Path] = None,
    basename: Optional[str] = None,
    preload: Optional[bool] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> MessageSource:
    """Create and configure a MessageSource.

    Explicit arguments win over ``i18n_settings``; with neither, the
    packaged ``lingo/locales`` directory is used.

    Args:
        catalog_dir: Directory of YAML catalogs.
        basename: Only read catalog files with this name part.
        preload: Whether to load catalogs immediately.
        i18n_settings: Settings to take defaults from.

    Returns:
        MessageSource: Configured message source.

    Raises:
        ValueError: If the catalog directory does not exist.
        InvalidCatalogSet: If preloading finds no default catalog.

    Usage:
        # Use defaults (packaged catalogs, preload)
        source = create_message_source()

        # Custom directory, loaded later
        source = create_message_source(catalog_dir=Path("/srv/locales"), preload=False)
        source.reload()
    """
    i18n_settings = i18n_settings or I18nSettings()
    if catalog_dir is None:
        catalog_dir = i18n_settings.CATALOG_DIR
    if basename is None:
        basename = i18n_settings.CATALOG_BASENAME
    if preload is None:
        preload = i18n_settings.PRELOAD

    loader = YAMLCatalogLoader(catalog_dir=catalog_dir, basename=basename)
    source = MessageSource(loader=loader)

    if preload:
        source.reload()
        logger.info(
            "message_source_created_with_preload",
            catalog_dir=str(catalog_dir),
            locale_count=len(source.available_locales()),
        )
    else:
        logger.info("message_source_created_lazy", catalog_dir=str(catalog_dir))

    return source
