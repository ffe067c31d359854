"""i18n system - locale negotiation and message resolution.

Resolves a message key, a client locale preference and positional arguments
into formatted text, falling back across locales deterministically.

Main components:
- models: Locale, Catalog, CatalogSet, LocalePreference, ResolvedMessage
- negotiator: LocaleNegotiator for Accept-Language style preferences
- store: CatalogStore with atomic hot reload
- resolver: ResolutionEngine implementing the fallback chain
- formatter: FormatEngine for {N} placeholders and brace escaping
- loader: CatalogLoader and YAMLCatalogLoader
- service: MessageSource facade
"""

from lingo.i18n.exceptions import (
    I18nError,
    InvalidCatalogSet,
    InvalidLocale,
    MalformedTemplate,
    MissingKey,
)
from lingo.i18n.formatter import FormatEngine
from lingo.i18n.loader import CatalogLoader, YAMLCatalogLoader
from lingo.i18n.models import (
    DEFAULT,
    Catalog,
    CatalogSet,
    Locale,
    LocalePreference,
    PreferenceEntry,
    ResolutionRequest,
    ResolvedMessage,
)
from lingo.i18n.negotiator import LocaleNegotiator
from lingo.i18n.resolver import ResolutionEngine
from lingo.i18n.service import MessageSource
from lingo.i18n.store import CatalogStore

__all__ = [
    "DEFAULT",
    "Locale",
    "Catalog",
    "CatalogSet",
    "LocalePreference",
    "PreferenceEntry",
    "ResolutionRequest",
    "ResolvedMessage",
    "I18nError",
    "InvalidLocale",
    "InvalidCatalogSet",
    "MissingKey",
    "MalformedTemplate",
    "LocaleNegotiator",
    "CatalogStore",
    "ResolutionEngine",
    "FormatEngine",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "MessageSource",
]
