"""Root test configuration: isolated environment and in-memory collaborators"""

import os

import pytest

from seopub.core.models import Article


_ENV_VARS = [
    "OPENAI_API_KEY", "SANITY_PROJECT_ID", "SANITY_DATASET", "SANITY_API_TOKEN", "PORT", "LOG_LEVEL",
]

BLOCKS_JSON = (
    '[{"_type": "block", "_key": "b1", "style": "h2", '
    '"children": [{"_type": "span", "text": "Intro"}]}, '
    '{"_type": "block", "_key": "b2", "style": "normal", '
    '"children": [{"_type": "span", "text": "Body text."}]}]'
)


class FakeLLM:
    """Replays canned replies in order; an Exception reply is raised. The last reply repeats."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, prompt, max_tokens=4000, temperature=0.7):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeCMS:
    """Records created documents; categories and default image are fixed."""

    def __init__(self, categories=None, default_image="image-latest", fail_categories=False):
        self.categories = categories if categories is not None else []
        self.default_image = default_image
        self.fail_categories = fail_categories
        self.created = []
        self.image_queries = 0

    def get_categories(self):
        if self.fail_categories:
            raise RuntimeError("categories unavailable")
        return self.categories

    def get_default_image(self):
        self.image_queries += 1
        return self.default_image

    def create_document(self, document):
        self.created.append(document)
        return f"doc-{len(self.created)}"


class FakeScraper:
    def __init__(self, article=None, error=None):
        self.article = article or Article(title="Example Page", content="Some page text.", date="2024-01-15")
        self.error = error
        self.urls = []

    def scrape(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.article


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in an empty directory with no service credentials in the environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("SEOPUB_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="fake_llm")
def fake_llm_fixture():
    """Factory: fake_llm(*replies) -> FakeLLM."""
    return FakeLLM


@pytest.fixture(name="fake_cms")
def fake_cms_fixture():
    """Factory: fake_cms(categories=..., default_image=...) -> FakeCMS."""
    return FakeCMS


@pytest.fixture(name="fake_scraper")
def fake_scraper_fixture():
    """Factory: fake_scraper(article=..., error=...) -> FakeScraper."""
    return FakeScraper


@pytest.fixture(name="blocks_json")
def blocks_json_fixture():
    """A valid two-block content reply."""
    return BLOCKS_JSON
