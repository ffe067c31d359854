"""Message source service.

Single entry point wiring negotiation, catalog storage, resolution and
reloading. One instance is created per process by the factory and handed
to callers explicitly.
"""

from typing import Any, List, Optional, Sequence

from lingo.core.logging import get_module_logger
from lingo.i18n.loader import CatalogLoader
from lingo.i18n.models import (
    CatalogSet,
    Locale,
    LocalePreference,
    ResolutionRequest,
    ResolvedMessage,
)
from lingo.i18n.negotiator import LocaleNegotiator
from lingo.i18n.resolver import ResolutionEngine
from lingo.i18n.store import CatalogStore

logger = get_module_logger()


class MessageSource:
    """Resolves localized messages and manages catalog reloads.

    Usage:
        source = MessageSource(loader=YAMLCatalogLoader(Path("locales")))
        source.reload()
        message = source.get_message(
            "incident.created", "fr-CA,fr;q=0.9", args=["INC-42"]
        )
        message.text         # "Incident INC-42 créé"
        message.locale_used  # Locale(language="fr", region=None)

    Attributes:
        store: CatalogStore holding the active catalog set.
        loader: Optional CatalogLoader used by reload().
        negotiator: LocaleNegotiator for raw preference strings.
        engine: ResolutionEngine bound to the store.
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        loader: Optional[CatalogLoader] = None,
        negotiator: Optional[LocaleNegotiator] = None,
        engine: Optional[ResolutionEngine] = None,
    ):
        self.store = store or CatalogStore()
        self.loader = loader
        self.negotiator = negotiator or LocaleNegotiator()
        self.engine = engine or ResolutionEngine(self.store)

    def get_message(
        self,
        key: str,
        accept_language: Optional[str] = None,
        args: Sequence[Any] = (),
    ) -> ResolvedMessage:
        """Resolve a message for a raw client preference.

        Args:
            key: Message key.
            accept_language: Raw preference expression, e.g. an
                Accept-Language header value. None means default only.
            args: Positional template arguments.

        Returns:
            ResolvedMessage with formatted text and the locale used.

        Raises:
            MissingKey: If no catalog defines the key.
            MalformedTemplate: If the template cannot be formatted.
        """
        preferences = self.negotiator.parse(accept_language)
        return self.resolve(key, preferences, args)

    def resolve(
        self,
        key: str,
        preferences: LocalePreference,
        args: Sequence[Any] = (),
    ) -> ResolvedMessage:
        """Resolve a message for an already negotiated preference."""
        return self.engine.resolve(
            ResolutionRequest(key=key, preferences=preferences, args=tuple(args))
        )

    def reload(self) -> int:
        """Reload catalogs from the loader and publish them.

        Returns:
            Version of the newly published catalog set.

        Raises:
            RuntimeError: If no loader is configured.
            InvalidCatalogSet: If the loaded set has no default catalog.
            ValueError: If the loader cannot parse its source.
        """
        if self.loader is None:
            raise RuntimeError("MessageSource has no loader to reload from")

        try:
            catalog_set = self.loader.load_all()
        except Exception as e:
            logger.error(
                "catalog_reload_failed",
                error=str(e),
                active_version=self.store.version,
            )
            raise

        version = self.store.load(catalog_set)
        logger.info("reloaded_catalogs", version=version)
        return version

    def load(self, catalog_set: CatalogSet) -> int:
        """Publish a caller-built catalog set.

        Returns:
            Version assigned to the published set.
        """
        return self.store.load(catalog_set)

    def has_message(self, key: str, locale: Optional[Locale] = None) -> bool:
        """Check if a key exists in one catalog, without fallback.

        Args:
            key: Message key.
            locale: Catalog to check. None checks the default catalog.

        Returns:
            True if that exact catalog defines the key.
        """
        if locale is None:
            return key in self.store.default_catalog()
        catalog = self.store.lookup_exact(locale)
        return catalog is not None and key in catalog

    def available_locales(self) -> List[Locale]:
        """Get the locales in the active catalog set."""
        return self.store.snapshot().locales

    @property
    def version(self) -> int:
        return self.store.version
