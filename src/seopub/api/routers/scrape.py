"""Scrape endpoints: URL -> SEO Markdown."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, Response

from seopub.api.deps import Services, get_services
from seopub.core.pipeline import run_scrape


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scrape", tags=["scrape"])


def _url_from(body: Any) -> str | None:
    if isinstance(body, dict) and isinstance(body.get("url"), str):
        return body["url"]
    return None


@router.post("/")
def scrape(
    services: Annotated[Services, Depends(get_services)],
    body: Annotated[Any, Body()] = None,
):
    """Scrape a URL and return SEO-optimized Markdown with frontmatter.

    The Markdown is also written to the storage directory when one is
    configured; a failed write does not change the response.
    """
    url = _url_from(body)
    if not url:
        return JSONResponse({"error": "URL is required and must be a string"}, status_code=400)

    try:
        markdown = run_scrape(url, services.scraper, services.enricher, services.store)
    except Exception:
        logger.exception("Scraping error for %s", url)
        return JSONResponse({"error": "Failed to scrape and transform content"}, status_code=500)

    return Response(content=markdown, status_code=200, headers={"Content-Type": "text/markdown"})


@router.get("/status")
def status():
    """Static healthcheck."""
    return {"status": "ok"}


@router.get("/{scrape_id}")
def get_scrape(scrape_id: str):
    # Stored results are not retrievable yet; the route only reserves the path.
    return {"status": "ok"}
