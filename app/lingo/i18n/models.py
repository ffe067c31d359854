"""Message catalog models for the i18n system.

Defines the immutable data structures shared by the negotiator, the catalog
store and the resolution engine.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import (
    Any,
    Iterator,
    Literal,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from lingo.i18n.exceptions import InvalidCatalogSet, InvalidLocale

DEFAULT = "default"

_TAG_PATTERN = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{2}|[0-9]{3}))?$")


@dataclass(frozen=True)
class Locale:
    """A ``(language, region)`` locale identifier.

    Language is lower case, region upper case (or None). Two locales are
    equal only when both components match.

    Attributes:
        language: ISO 639 language code (e.g., "en", "pt").
        region: ISO 3166 region or UN M.49 area code (e.g., "BR", "419").
    """

    language: str
    region: Optional[str] = None

    def __post_init__(self) -> None:
        # Same normalisation as parse(), so direct construction compares equal
        if isinstance(self.language, str):
            object.__setattr__(self, "language", self.language.lower())
        if isinstance(self.region, str):
            object.__setattr__(self, "region", self.region.upper() or None)

    def __str__(self) -> str:
        """Return the canonical tag (e.g., "en" or "pt-BR")."""
        return self.tag

    @property
    def tag(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """Parse a ``language`` or ``language-region`` tag.

        Args:
            tag: Locale tag (e.g., "en", "pt-BR", "pt_br").

        Returns:
            Normalised Locale.

        Raises:
            InvalidLocale: If the tag does not have the expected shape.
        """
        match = _TAG_PATTERN.match(tag.strip()) if isinstance(tag, str) else None
        if match is None:
            raise InvalidLocale(tag)
        language, region = match.groups()
        return cls(language=language.lower(), region=region.upper() if region else None)


LocaleUsed = Union[Locale, Literal["default"]]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Catalog:
    """Immutable key to template mapping for a single locale.

    Attributes:
        locale: Locale this catalog serves, or None for the default catalog.
        messages: Read-only mapping of message key to template.
        loaded_at: Timestamp (ISO 8601) when the catalog was built.
    """

    locale: Optional[Locale]
    messages: Mapping[str, str] = field(default_factory=dict)
    loaded_at: str = field(default_factory=_now)

    def __post_init__(self) -> None:
        for key, template in self.messages.items():
            if not isinstance(key, str) or not isinstance(template, str):
                raise InvalidCatalogSet(
                    f"catalog for {self.locale or DEFAULT} maps {key!r} to "
                    f"{type(template).__name__}, expected str"
                )
        # Copy so later changes to the caller's dict are not visible here
        object.__setattr__(
            self, "messages", MappingProxyType(dict(self.messages))
        )

    def get(self, key: str) -> Optional[str]:
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


@dataclass(frozen=True)
class CatalogSet:
    """Immutable set of catalogs keyed by locale, plus the default catalog.

    The default catalog is the fallback floor and is always present, even
    when empty. ``version`` is assigned by the CatalogStore on publication.

    Attributes:
        catalogs: Read-only mapping of Locale to Catalog, in insertion order.
        default: Locale-independent catalog consulted last.
        version: Publication counter, 0 until published.
    """

    catalogs: Mapping[Locale, Catalog] = field(default_factory=dict)
    default: Catalog = None  # type: ignore[assignment]
    version: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.default, Catalog):
            raise InvalidCatalogSet("a default catalog is required")

        languages: dict = {}
        for locale, catalog in self.catalogs.items():
            if not isinstance(catalog, Catalog):
                raise InvalidCatalogSet(f"entry for {locale} is not a Catalog")
            if catalog.locale != locale:
                raise InvalidCatalogSet(
                    f"catalog for {catalog.locale} stored under {locale}"
                )
            current = languages.get(locale.language)
            # Region-less variant wins, otherwise first inserted
            if current is None or (current.region and not locale.region):
                languages[locale.language] = locale

        object.__setattr__(
            self, "catalogs", MappingProxyType(dict(self.catalogs))
        )
        object.__setattr__(self, "_by_language", MappingProxyType(languages))

    @classmethod
    def empty(cls) -> "CatalogSet":
        """Create a catalog set with an empty default catalog."""
        return cls(default=Catalog(locale=None))

    @classmethod
    def from_mapping(
        cls,
        catalogs: Mapping[str, Mapping[str, str]],
        default: Optional[Mapping[str, str]] = None,
    ) -> "CatalogSet":
        """Build a catalog set from plain ``{tag: {key: template}}`` data.

        Args:
            catalogs: Templates per locale tag.
            default: Templates for the default catalog. Required.

        Raises:
            InvalidLocale: If a tag cannot be parsed.
            InvalidCatalogSet: If ``default`` is None.
        """
        if default is None:
            raise InvalidCatalogSet("a default catalog is required")
        built = {}
        for tag, messages in catalogs.items():
            locale = Locale.parse(tag)
            built[locale] = Catalog(locale=locale, messages=messages)
        return cls(catalogs=built, default=Catalog(locale=None, messages=default))

    def lookup_exact(self, locale: Locale) -> Optional[Catalog]:
        return self.catalogs.get(locale)

    def lookup_language_only(self, language: str) -> Optional[Catalog]:
        locale = self._by_language.get(language.lower())  # type: ignore[attr-defined]
        return self.catalogs[locale] if locale is not None else None

    def default_catalog(self) -> Catalog:
        return self.default

    @property
    def locales(self) -> list:
        return list(self.catalogs.keys())


class PreferenceEntry(NamedTuple):
    """A candidate locale with its client-assigned quality."""

    locale: Locale
    quality: float


@dataclass(frozen=True)
class LocalePreference:
    """Ordered candidate locales, highest quality first.

    Attributes:
        entries: Candidates sorted descending by quality, ties in input order.
    """

    entries: Tuple[PreferenceEntry, ...] = ()

    def __iter__(self) -> Iterator[PreferenceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def locales(self) -> list:
        return [entry.locale for entry in self.entries]

    @classmethod
    def of(cls, *tags: str) -> "LocalePreference":
        """Build a preference from tags in priority order, all with quality 1.0."""
        return cls(tuple(PreferenceEntry(Locale.parse(tag), 1.0) for tag in tags))


@dataclass(frozen=True)
class ResolutionRequest:
    """A single message lookup.

    Attributes:
        key: Message key (e.g., "incident.created").
        preferences: Client locale candidates.
        args: Positional arguments for the template.
    """

    key: str
    preferences: LocalePreference = field(default_factory=LocalePreference)
    args: Sequence[Any] = ()


@dataclass(frozen=True)
class ResolvedMessage:
    """A formatted message and where it came from.

    Attributes:
        text: Final formatted text.
        locale_used: Locale of the catalog that defined the key, or "default".
        version: Version of the catalog set the text was taken from.
    """

    text: str
    locale_used: LocaleUsed
    version: int = 0

    @property
    def is_default(self) -> bool:
        return self.locale_used == DEFAULT

    @property
    def locale_tag(self) -> str:
        """Return the canonical tag of the locale used, or "default"."""
        return DEFAULT if self.is_default else str(self.locale_used)
