import pytest

from lingo.services import providers


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset process-wide singletons so tests never share a message source."""
    providers.get_settings.cache_clear()
    providers.get_message_source.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_message_source.cache_clear()
