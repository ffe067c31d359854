import pytest
from fastapi.testclient import TestClient

from lingo.core.config import I18nSettings, Settings
from lingo.i18n.factory import create_message_source
from lingo.server.server import create_app
from lingo.services import get_message_source, get_settings
from tests.factories.i18n import write_catalog_files


@pytest.fixture
def catalog_dir(tmp_path):
    return write_catalog_files(
        tmp_path,
        {
            "messages.yml": {
                "greeting": "Hello {0}",
                "broken": "Needs {3}",
            },
            "messages.en-US.yml": {"greeting": "Howdy {0}"},
            "messages.fr.yml": {"greeting": "Bonjour {0}"},
            "messages.es.yml": {"greeting": "Hola {0}"},
        },
    )


@pytest.fixture
def message_source(catalog_dir):
    return create_message_source(catalog_dir=catalog_dir)


@pytest.fixture
def app(message_source, catalog_dir):
    app = create_app()
    app.dependency_overrides[get_message_source] = lambda: message_source
    app.dependency_overrides[get_settings] = lambda: Settings(
        i18n=I18nSettings(I18N_CATALOG_DIR=catalog_dir, I18N_DEFAULT_LANGUAGE="en")
    )
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
