"""FastAPI application factory"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from seopub.api.deps import Services, build_services
from seopub.api.routers import markdown, scrape
from seopub.config import Settings, load_config


logger = logging.getLogger(__name__)

VERSION = "0.1.0"


async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies become 400 {error} instead of FastAPI's 422 detail list."""
    return JSONResponse({"error": "Request body must be valid JSON"}, status_code=400)


def create_app(settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    """Build the app; explicit services (e.g. fakes in tests) skip wiring from settings."""
    if services is None:
        services = build_services(settings or load_config())

    app = FastAPI(
        title="seopub",
        description="Scrape articles into SEO Markdown and publish Markdown posts to Sanity",
        version=VERSION,
    )
    app.state.services = services
    app.add_exception_handler(RequestValidationError, _bad_request)

    app.include_router(scrape.router)
    app.include_router(markdown.router)

    @app.get("/")
    def root():
        """API root - returns basic info."""
        return {"name": "seopub", "version": VERSION, "docs": "/docs"}

    return app
