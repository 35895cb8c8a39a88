"""HTML scraping: fetch a page and pull its title and main text into an Article"""

import logging
from datetime import date
from typing import Optional

import requests
from bs4 import BeautifulSoup

from seopub.core.models import Article


logger = logging.getLogger(__name__)

USER_AGENT = "seopub/0.1 (+article scraper)"
DEFAULT_TITLE = "Untitled"
DEFAULT_CONTENT = "No content found"


def extract_title(soup: BeautifulSoup) -> str:
    """<title>, else the first <h1>, else DEFAULT_TITLE."""
    if soup.title and (title := soup.title.get_text().strip()):
        return title
    h1 = soup.find("h1")
    if h1 and (heading := h1.get_text().strip()):
        return heading
    return DEFAULT_TITLE


def extract_content(soup: BeautifulSoup) -> str:
    """Text of the first <main> element, else DEFAULT_CONTENT."""
    main = soup.find("main")
    text = main.get_text().strip() if main else ""
    return text or DEFAULT_CONTENT


def parse_article(html: str, today: Optional[date] = None) -> Article:
    """Build an Article from raw HTML, dated today."""
    soup = BeautifulSoup(html, "html.parser")
    return Article(
        title=extract_title(soup),
        content=extract_content(soup),
        date=(today or date.today()).isoformat(),
    )


class Scraper:
    """Fetches a URL and parses whatever body comes back.

    Non-2xx responses are not errors: their body (often empty) is parsed like
    any other page and falls back to the default title and content.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def scrape(self, url: str) -> Article:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)
        if not response.ok:
            logger.warning("Fetching %s returned HTTP %s; parsing body anyway", url, response.status_code)
        return parse_article(response.text)
