"""Feature-level fixtures for i18n system tests.

Provides catalog sets, stores and YAML catalog directories for resolution
scenarios.
"""

import pytest

from lingo.i18n import (
    CatalogStore,
    FormatEngine,
    LocaleNegotiator,
    MessageSource,
    ResolutionEngine,
    YAMLCatalogLoader,
)
from tests.factories.i18n import make_catalog_set, write_catalog_files


@pytest.fixture
def catalog_set():
    """Default CatalogSet with en, en-US, fr, es and pt-BR catalogs."""
    return make_catalog_set()


@pytest.fixture
def store(catalog_set):
    """CatalogStore serving the default CatalogSet."""
    return CatalogStore(catalog_set)


@pytest.fixture
def engine(store):
    """ResolutionEngine bound to the store."""
    return ResolutionEngine(store)


@pytest.fixture
def negotiator():
    return LocaleNegotiator()


@pytest.fixture
def formatter():
    return FormatEngine()


@pytest.fixture
def temp_catalog_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - messages.yml
    - messages.en-US.yml
    - messages.fr.yml
    - messages.fr-CA.yml
    - errors.yml
    - errors.fr.yml
    """
    return write_catalog_files(
        tmp_path,
        {
            "messages.yml": {
                "incident": {
                    "created": "Incident {0} created",
                    "resolved": "Incident {0} resolved",
                },
                "common": {"welcome": "Welcome, {0}!"},
            },
            "messages.en-US.yml": {"common": {"welcome": "Welcome aboard, {0}!"}},
            "messages.fr.yml": {
                "incident": {
                    "created": "Incident {0} créé",
                    "resolved": "Incident {0} résolu",
                },
                "common": {"welcome": "Bienvenue, {0} !"},
            },
            "messages.fr-CA.yml": {"common": {"welcome": "Bienvenue au Canada, {0} !"}},
            "errors.yml": {"errors": {"not_found": "Not found"}},
            "errors.fr.yml": {"errors": {"not_found": "Introuvable"}},
        },
    )


@pytest.fixture
def yaml_loader(temp_catalog_dir):
    """Create YAMLCatalogLoader for the temporary catalog directory."""
    return YAMLCatalogLoader(temp_catalog_dir)


@pytest.fixture
def message_source(yaml_loader):
    """MessageSource loaded from the temporary catalog directory."""
    source = MessageSource(loader=yaml_loader)
    source.reload()
    return source


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
