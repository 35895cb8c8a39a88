"""Shared fixtures for HTTP API tests"""

import pytest
from fastapi.testclient import TestClient

from seopub.api.app import create_app
from seopub.api.deps import Services
from seopub.core.categories import CategorySelector
from seopub.core.convert import PortableTextConverter
from seopub.core.enrich import ArticleEnricher
from seopub.core.storage import MarkdownStore


@pytest.fixture(name="make_client")
def make_client_fixture(tmp_path, fake_llm, fake_scraper, blocks_json):
    """Factory building a TestClient over in-memory services; keyword args replace defaults."""
    def _make(**overrides):
        services = Services(
            scraper=overrides.pop("scraper", fake_scraper()),
            enricher=overrides.pop("enricher", ArticleEnricher(fake_llm(RuntimeError("no llm")))),
            converter=overrides.pop("converter", PortableTextConverter(fake_llm(blocks_json))),
            store=overrides.pop("store", MarkdownStore(tmp_path / "storage")),
            cms=overrides.pop("cms", None),
            selector=overrides.pop("selector", CategorySelector(fake_llm("cat-a"))),
        )
        return TestClient(create_app(services=services))
    return _make
