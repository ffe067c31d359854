"""Tests for lingo.i18n.models module."""

import dataclasses

import pytest

from lingo.i18n import (
    DEFAULT,
    Catalog,
    CatalogSet,
    InvalidCatalogSet,
    InvalidLocale,
    Locale,
    LocalePreference,
    ResolvedMessage,
)
from tests.factories.i18n import make_catalog, make_catalog_set


class TestLocale:
    """Tests for Locale model."""

    def test_parse_language_only(self):
        """parse() handles a bare language tag."""
        assert Locale.parse("en") == Locale("en", None)

    def test_parse_language_region(self):
        """parse() splits language and region."""
        assert Locale.parse("pt-BR") == Locale("pt", "BR")

    def test_parse_normalizes_case(self):
        """parse() lower-cases language and upper-cases region."""
        assert Locale.parse("EN-us") == Locale("en", "US")

    def test_parse_accepts_underscore(self):
        """parse() accepts underscore separators."""
        assert Locale.parse("pt_br") == Locale("pt", "BR")

    def test_parse_numeric_region(self):
        """parse() accepts UN M.49 numeric regions."""
        assert Locale.parse("es-419") == Locale("es", "419")

    def test_parse_strips_whitespace(self):
        """parse() ignores surrounding whitespace."""
        assert Locale.parse("  fr ") == Locale("fr", None)

    @pytest.mark.parametrize(
        "tag", ["", "*", "e", "english", "zh-Hant-TW", "en-", "en-USA", "12"]
    )
    def test_parse_rejects_malformed(self, tag):
        """parse() raises InvalidLocale for tags of the wrong shape."""
        with pytest.raises(InvalidLocale):
            Locale.parse(tag)

    def test_invalid_locale_is_value_error(self):
        """InvalidLocale can be caught as ValueError."""
        with pytest.raises(ValueError):
            Locale.parse("not a tag")

    def test_canonical_tag(self):
        """str() returns the canonical tag."""
        assert str(Locale("en")) == "en"
        assert str(Locale("pt", "BR")) == "pt-BR"

    def test_equality_requires_both_components(self):
        """Locales differing in region are not equal."""
        assert Locale("en") != Locale("en", "US")
        assert Locale("en", "US") == Locale.parse("en-US")

    def test_direct_construction_normalizes_case(self):
        """Locale() normalises case the same way parse() does."""
        assert Locale("EN", "us") == Locale.parse("en-US")
        assert Locale("Fr").language == "fr"

    def test_locale_is_hashable_and_frozen(self):
        """Locale can be used as dict key and cannot be modified."""
        locale = Locale("fr")
        d = {locale: "value"}
        assert d[Locale.parse("fr")] == "value"
        with pytest.raises(dataclasses.FrozenInstanceError):
            locale.language = "es"


class TestCatalog:
    """Tests for Catalog model."""

    def test_catalog_lookup(self):
        """Catalog exposes get, membership and length."""
        catalog = make_catalog()
        assert catalog.get("common.welcome") == "Welcome, {0}!"
        assert catalog.get("missing") is None
        assert "incident.created" in catalog
        assert "missing" not in catalog
        assert len(catalog) == 2
        assert sorted(catalog) == ["common.welcome", "incident.created"]

    def test_catalog_messages_are_read_only(self):
        """Catalog messages cannot be mutated."""
        catalog = make_catalog()
        with pytest.raises(TypeError):
            catalog.messages["new"] = "value"

    def test_catalog_copies_source_mapping(self):
        """Later changes to the source dict are not visible."""
        source = {"key": "value"}
        catalog = Catalog(locale=Locale("en"), messages=source)
        source["key"] = "changed"
        source["other"] = "added"
        assert catalog.get("key") == "value"
        assert "other" not in catalog

    @pytest.mark.parametrize("messages", [{"k": 5}, {"k": None}, {1: "v"}])
    def test_catalog_rejects_non_text(self, messages):
        """Keys and templates must be strings."""
        with pytest.raises(InvalidCatalogSet):
            Catalog(locale=Locale("fr"), messages=messages)

    def test_from_mapping_rejects_non_text_template(self):
        """from_mapping() surfaces non-string templates as InvalidCatalogSet."""
        with pytest.raises(InvalidCatalogSet):
            CatalogSet.from_mapping({"fr": {"k": 5}}, default={})

    def test_catalog_records_loaded_at(self):
        """Catalog has a loaded_at timestamp by default."""
        catalog = Catalog(locale=None)
        assert catalog.loaded_at


class TestCatalogSet:
    """Tests for CatalogSet model."""

    def test_requires_default_catalog(self):
        """CatalogSet without a default catalog is rejected."""
        with pytest.raises(InvalidCatalogSet):
            CatalogSet(catalogs={})

    def test_from_mapping_requires_default(self):
        """from_mapping() rejects a missing default mapping."""
        with pytest.raises(InvalidCatalogSet):
            CatalogSet.from_mapping({"en": {"k": "v"}}, default=None)

    def test_empty_default_is_allowed(self):
        """An empty default catalog satisfies the invariant."""
        catalog_set = CatalogSet.from_mapping({}, default={})
        assert len(catalog_set.default_catalog()) == 0

    def test_empty(self):
        """empty() builds a set with only an empty default catalog."""
        catalog_set = CatalogSet.empty()
        assert catalog_set.locales == []
        assert len(catalog_set.default) == 0
        assert catalog_set.version == 0

    def test_rejects_mismatched_locale(self):
        """A catalog stored under a different locale is rejected."""
        with pytest.raises(InvalidCatalogSet):
            CatalogSet(
                catalogs={Locale("fr"): make_catalog("en")},
                default=make_catalog(None),
            )

    def test_lookup_exact(self, catalog_set):
        """lookup_exact() matches both components."""
        assert catalog_set.lookup_exact(Locale("en", "US")).get("greeting") == "Howdy"
        assert catalog_set.lookup_exact(Locale("en", "GB")) is None

    def test_lookup_language_only_prefers_regionless(self):
        """lookup_language_only() prefers the catalog without region."""
        catalog_set = make_catalog_set(
            catalogs={"en-US": {"k": "us"}, "en": {"k": "plain"}, "en-GB": {"k": "gb"}},
            default={},
        )
        assert catalog_set.lookup_language_only("en").locale == Locale("en")

    def test_lookup_language_only_first_inserted(self):
        """Without a region-less variant the first inserted one wins."""
        catalog_set = make_catalog_set(
            catalogs={"pt-PT": {"k": "pt"}, "pt-BR": {"k": "br"}},
            default={},
        )
        assert catalog_set.lookup_language_only("pt").locale == Locale("pt", "PT")

    def test_lookup_language_only_with_upper_case_locale(self):
        """Catalogs keyed by a directly built upper-case Locale are found."""
        catalog = Catalog(locale=Locale("EN"), messages={"k": "v"})
        catalog_set = CatalogSet(
            catalogs={Locale("EN"): catalog}, default=make_catalog(None)
        )
        assert catalog_set.lookup_language_only("en") is catalog

    def test_lookup_language_only_missing(self, catalog_set):
        """lookup_language_only() returns None for unknown languages."""
        assert catalog_set.lookup_language_only("de") is None

    def test_catalogs_are_read_only(self, catalog_set):
        """The locale mapping cannot be mutated."""
        with pytest.raises(TypeError):
            catalog_set.catalogs[Locale("de")] = make_catalog("de")

    def test_locales_keep_insertion_order(self, catalog_set):
        """locales lists catalogs in insertion order."""
        assert [str(locale) for locale in catalog_set.locales] == [
            "en",
            "en-US",
            "fr",
            "es",
            "pt-BR",
        ]


class TestLocalePreference:
    """Tests for LocalePreference model."""

    def test_empty_preference_is_falsy(self):
        """An empty preference has no entries."""
        preference = LocalePreference()
        assert not preference
        assert len(preference) == 0
        assert preference.locales == []

    def test_of_builds_ordered_entries(self):
        """of() keeps the given order with quality 1.0."""
        preference = LocalePreference.of("fr-CA", "fr")
        assert preference.locales == [Locale("fr", "CA"), Locale("fr")]
        assert all(entry.quality == 1.0 for entry in preference)


class TestResolvedMessage:
    """Tests for ResolvedMessage model."""

    def test_default_marker(self):
        """is_default and locale_tag report the default catalog."""
        message = ResolvedMessage(text="x", locale_used=DEFAULT)
        assert message.is_default
        assert message.locale_tag == "default"

    def test_locale_marker(self):
        """locale_tag reports the canonical tag of the locale used."""
        message = ResolvedMessage(text="x", locale_used=Locale("pt", "BR"), version=3)
        assert not message.is_default
        assert message.locale_tag == "pt-BR"
        assert message.version == 3
