"""Fallback-chain message resolution.

Walks the client's candidate locales against one CatalogSet snapshot and
formats the first template that defines the requested key.
"""

from typing import Optional, Tuple

from lingo.core.logging import get_module_logger
from lingo.i18n.exceptions import MalformedTemplate, MissingKey
from lingo.i18n.formatter import FormatEngine
from lingo.i18n.models import (
    DEFAULT,
    CatalogSet,
    LocalePreference,
    LocaleUsed,
    ResolutionRequest,
    ResolvedMessage,
)
from lingo.i18n.store import CatalogStore

logger = get_module_logger()


class ResolutionEngine:
    """Resolves message keys across catalogs using the fallback chain.

    Resolution order for each candidate, in preference order:
    1. Exact locale catalog (e.g., "pt-BR")
    2. Language-only catalog (e.g., "pt", or another "pt-*" variant)
    Then the default catalog once every candidate is exhausted.

    Attributes:
        store: CatalogStore providing catalog set snapshots.
        formatter: FormatEngine applied to the resolved template.
    """

    def __init__(self, store: CatalogStore, formatter: Optional[FormatEngine] = None):
        self.store = store
        self.formatter = formatter or FormatEngine()

    def resolve(self, request: ResolutionRequest) -> ResolvedMessage:
        """Resolve and format a message.

        Args:
            request: Key, candidate locales and positional arguments.

        Returns:
            ResolvedMessage with the formatted text and the locale used.

        Raises:
            MissingKey: If no catalog in the fallback search defines the key.
            MalformedTemplate: If the resolved template cannot be formatted.
        """
        template, locale_used, version = self.find_template(
            request.key, request.preferences
        )

        try:
            text = self.formatter.format(template, request.args)
        except MalformedTemplate as e:
            error = e.with_context(request.key, str(locale_used))
            logger.error(
                "malformed_template",
                key=request.key,
                locale=str(locale_used),
                index=e.index,
                arg_count=len(request.args),
            )
            raise error from e

        return ResolvedMessage(text=text, locale_used=locale_used, version=version)

    def find_template(
        self,
        key: str,
        preferences: LocalePreference,
        catalog_set: Optional[CatalogSet] = None,
    ) -> Tuple[str, LocaleUsed, int]:
        """Find the raw template for a key without formatting it.

        Args:
            key: Message key.
            preferences: Candidate locales, highest priority first.
            catalog_set: Snapshot to search. Defaults to the store's current set.

        Returns:
            Tuple of (template, locale used or "default", catalog set version).

        Raises:
            MissingKey: If no catalog in the fallback search defines the key.
        """
        # One snapshot for the whole walk so a concurrent reload is never mixed in
        snapshot = catalog_set if catalog_set is not None else self.store.snapshot()

        for locale, _quality in preferences:
            catalog = snapshot.lookup_exact(locale)
            if catalog is not None and key in catalog:
                return catalog.messages[key], locale, snapshot.version

            catalog = snapshot.lookup_language_only(locale.language)
            if catalog is not None and key in catalog:
                if catalog.locale != locale:
                    logger.debug(
                        "resolved_via_language_only",
                        key=key,
                        requested=str(locale),
                        matched=str(catalog.locale),
                    )
                return catalog.messages[key], catalog.locale, snapshot.version

        default = snapshot.default_catalog()
        if key in default:
            if preferences:
                logger.debug(
                    "resolved_via_default",
                    key=key,
                    requested=[str(locale) for locale in preferences.locales],
                )
            return default.messages[key], DEFAULT, snapshot.version

        logger.warning(
            "missing_key",
            key=key,
            requested=[str(locale) for locale in preferences.locales],
            version=snapshot.version,
        )
        raise MissingKey(key)
