# PL/pagelinks/tests/conftest.py
import pytest
from django.utils import translation

from pagelinks.services.links import StyleConfig


@pytest.fixture(autouse=True)
def _english():
    """Подписи First/Previous/... проверяем на английском, независимо от LANGUAGE_CODE."""
    with translation.override("en"):
        yield


@pytest.fixture
def style() -> StyleConfig:
    return StyleConfig()


class RecordingUrlBuilder:
    """page_url_builder, который запоминает, для каких страниц его звали."""

    def __init__(self):
        self.calls = []

    def __call__(self, page: int) -> str:
        self.calls.append(page)
        return f"/items/?page={page}"


@pytest.fixture
def url_builder() -> RecordingUrlBuilder:
    return RecordingUrlBuilder()
