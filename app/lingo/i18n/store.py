"""In-memory catalog store with atomic hot reload.

Holds the active CatalogSet behind a single reference. Readers take that
reference once and never lock; ``load`` builds the replacement off to the
side and publishes it with one assignment.
"""

import dataclasses
import threading
from typing import Optional

from lingo.core.logging import get_module_logger
from lingo.i18n.exceptions import InvalidCatalogSet
from lingo.i18n.models import Catalog, CatalogSet, Locale

logger = get_module_logger()


class CatalogStore:
    """Single-writer, many-reader holder of the current CatalogSet.

    Attributes:
        version: Version of the catalog set currently served.
    """

    def __init__(self, catalog_set: Optional[CatalogSet] = None):
        """Initialize the store.

        Args:
            catalog_set: Initial catalog set. When omitted the store serves an
                empty default catalog at version 0.
        """
        self._write_lock = threading.Lock()
        self._current: CatalogSet = CatalogSet.empty()
        if catalog_set is not None:
            self.load(catalog_set)

    def load(self, catalog_set: CatalogSet) -> int:
        """Atomically replace the active catalog set.

        Args:
            catalog_set: Fully built replacement.

        Returns:
            Version assigned to the published set.

        Raises:
            InvalidCatalogSet: If the replacement has no default catalog. The
                previous set stays active.
        """
        if not isinstance(catalog_set, CatalogSet) or not isinstance(
            getattr(catalog_set, "default", None), Catalog
        ):
            logger.error(
                "catalog_set_rejected",
                reason="missing default catalog",
                active_version=self._current.version,
            )
            raise InvalidCatalogSet("a default catalog is required")

        with self._write_lock:
            version = self._current.version + 1
            published = dataclasses.replace(catalog_set, version=version)
            self._current = published

        logger.info(
            "catalog_set_loaded",
            version=version,
            locales=[str(locale) for locale in published.locales],
            default_size=len(published.default),
        )
        return version

    def snapshot(self) -> CatalogSet:
        """Return the catalog set active right now."""
        return self._current

    @property
    def version(self) -> int:
        return self._current.version

    def lookup_exact(self, locale: Locale) -> Optional[Catalog]:
        return self._current.lookup_exact(locale)

    def lookup_language_only(self, language: str) -> Optional[Catalog]:
        return self._current.lookup_language_only(language)

    def default_catalog(self) -> Catalog:
        return self._current.default_catalog()
