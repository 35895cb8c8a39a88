"""Unit tests for core/scrape.py"""

from datetime import date

import pytest

from seopub.core import scrape
from seopub.core.scrape import Scraper, parse_article


class _Response:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code
        self.ok = status_code < 400


@pytest.mark.parametrize("html,expected", [
    ("<html><head><title> Page Title </title></head><body><h1>H</h1></body></html>", "Page Title"),
    ("<html><body><h1>Heading Only</h1></body></html>", "Heading Only"),
    ("<html><head><title> </title></head><body><h1>Fallback</h1></body></html>", "Fallback"),
    ("<html><body><p>nothing</p></body></html>", "Untitled"),
])
def test_parse_article_title(html, expected):
    """Title comes from <title>, then the first <h1>, then 'Untitled'."""
    assert parse_article(html).title == expected


def test_parse_article_main_text():
    """Content is the trimmed text of the first <main>."""
    html = "<main>\n  <p>First</p><p>Second</p>\n</main><main>Other</main>"
    assert parse_article(html).content == "FirstSecond"


def test_parse_article_without_main():
    """Pages with no <main> get the placeholder content."""
    assert parse_article("<body><p>text</p></body>").content == "No content found"


def test_parse_article_date():
    """The article is dated with the given day in ISO form."""
    assert parse_article("", today=date(2024, 1, 15)).date == "2024-01-15"


def test_scraper_fetches_url(monkeypatch):
    """scrape passes a User-Agent and the timeout to requests.get."""
    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return _Response("<title>T</title><main>Body</main>")

    monkeypatch.setattr(scrape.requests, "get", fake_get)
    article = Scraper(timeout=5).scrape("https://example.com/a")
    assert (article.title, article.content) == ("T", "Body")
    assert seen["url"] == "https://example.com/a"
    assert "User-Agent" in seen["headers"]
    assert seen["timeout"] == 5


def test_scraper_parses_error_pages(monkeypatch):
    """A non-2xx response is parsed like any other page."""
    monkeypatch.setattr(scrape.requests, "get", lambda url, **kw: _Response("", status_code=404))
    article = Scraper().scrape("https://example.com/missing")
    assert article.title == "Untitled"
    assert article.content == "No content found"


def test_scraper_propagates_network_errors(monkeypatch):
    """Transport failures are raised to the caller."""
    def boom(url, **kw):
        raise scrape.requests.ConnectionError("refused")

    monkeypatch.setattr(scrape.requests, "get", boom)
    with pytest.raises(scrape.requests.ConnectionError):
        Scraper().scrape("https://example.invalid")
