"""Service wiring for the HTTP layer"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from seopub.config import Settings
from seopub.core.categories import CategorySelector
from seopub.core.cms import SanityClient
from seopub.core.convert import PortableTextConverter
from seopub.core.enrich import ArticleEnricher
from seopub.core.llm import CompletionClient
from seopub.core.scrape import Scraper
from seopub.core.storage import MarkdownStore


logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Collaborators shared by the request handlers. Optional ones are None when not configured."""
    scraper: Scraper
    enricher: ArticleEnricher
    converter: PortableTextConverter
    store: Optional[MarkdownStore] = None
    cms: Optional[SanityClient] = None
    selector: Optional[CategorySelector] = None


def build_services(settings: Settings) -> Services:
    """Create every collaborator from settings, warning about the features left disabled."""
    if not settings.has_llm:
        logger.warning("OPENAI_API_KEY is not set; LLM transformation will fall back or fail.")
    llm = CompletionClient(settings.openai_api_key, model=settings.openai_model)

    cms = None
    if settings.has_cms:
        cms = SanityClient(
            settings.sanity_project_id,
            settings.sanity_dataset,
            settings.sanity_token,
            api_version=settings.sanity_api_version,
            timeout=settings.request_timeout,
        )
    else:
        logger.warning("SANITY_PROJECT_ID or SANITY_API_TOKEN is not set; publishing to Sanity is disabled.")

    return Services(
        scraper=Scraper(timeout=settings.request_timeout),
        enricher=ArticleEnricher(llm, mode=settings.enrich_mode),
        converter=PortableTextConverter(llm),
        store=MarkdownStore(settings.storage_dir),
        cms=cms,
        selector=CategorySelector(llm),
    )


def get_services(request: Request) -> Services:
    """Dependency returning the services attached to the running app."""
    return request.app.state.services
