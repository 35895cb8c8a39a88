"""Pipeline step functions: scrape, assemble, and publish orchestration"""

import logging
from datetime import date
from typing import Any, Optional

from seopub.core import frontmatter as fm_codec
from seopub.core.categories import CategorySelector
from seopub.core.cms import SanityClient
from seopub.core.convert import PortableTextConverter
from seopub.core.enrich import ArticleEnricher
from seopub.core.fields import generate_missing_fields, reference
from seopub.core.schema import Post, validate_post
from seopub.core.scrape import Scraper
from seopub.core.storage import MarkdownStore
from seopub.core.utils.slug import generate_filename
from seopub.core.utils.tokens import first_heading
from seopub.errors import MissingImageError, PostValidationError, SeopubError


logger = logging.getLogger(__name__)

UNTITLED = "Untitled"

# Optional post fields copied verbatim from frontmatter when present
PASSTHROUGH_FIELDS = (
    "seoTitle",
    "seoDescription",
    "seoKeywords",
    "noIndex",
    "canonicalUrl",
    "questionsAnswers",
    "openGraph",
)


# --- scrape ---

def _filename_for(markdown: str) -> str:
    """Storage filename from the Markdown's frontmatter title and date."""
    fm = fm_codec.parse(markdown).frontmatter
    title = fm.get("title")
    day = fm.get("date")
    return generate_filename(
        title if isinstance(title, str) and title else UNTITLED,
        day if isinstance(day, str) and day else date.today().isoformat(),
    )


def run_scrape(
    url: str,
    scraper: Scraper,
    enricher: ArticleEnricher,
    store: Optional[MarkdownStore] = None,
    ) -> str:
    """Scrape url, render SEO Markdown, and save it when a store is given. Returns the Markdown.

    Scraper errors propagate; save failures are logged and never change the result.
    """
    article = scraper.scrape(url)
    markdown = enricher.to_markdown(article)

    if store is not None:
        filename = _filename_for(markdown)
        try:
            store.save(filename, markdown)
        except SeopubError as e:
            logger.error("Failed to save markdown file %s: %s", filename, e)
    return markdown


# --- assemble ---

def _resolve_default_image(cms: Optional[SanityClient]) -> Optional[str]:
    if cms is None:
        return None
    try:
        return cms.get_default_image()
    except Exception as e:
        logger.warning("Failed to fetch default image: %s", e)
        return None


def _resolve_categories(
    cms: Optional[SanityClient],
    selector: Optional[CategorySelector],
    title: str,
    description: str,
    content: str,
    default: list[dict[str, str]],
    ) -> list[dict[str, str]]:
    """One LLM-selected category reference, or `default` on any failure."""
    if cms is None or selector is None:
        return default
    try:
        available = cms.get_categories()
        if not available:
            return default
        selected = selector.select_category(title, description, content, available)
        return [reference(selected)]
    except Exception as e:
        logger.warning("Failed to select category, using default: %s", e)
        return default


def _resolve_title(frontmatter: dict[str, Any], content: str) -> str:
    title = frontmatter.get("title")
    if isinstance(title, str) and title.strip():
        return title
    return first_heading(content) or UNTITLED


def run_assemble(
    markdown: str,
    converter: PortableTextConverter,
    cms: Optional[SanityClient] = None,
    selector: Optional[CategorySelector] = None,
    frontmatter: Optional[dict[str, Any]] = None,
    ) -> Post:
    """Build a validated Post from Markdown.

    `frontmatter`, when given, replaces the parsed header entirely. Raises
    ConversionError, MissingImageError or PostValidationError; never returns
    an unvalidated post.
    """
    parsed = fm_codec.parse(markdown)
    fm = frontmatter if frontmatter is not None else parsed.frontmatter

    body = converter.convert(parsed.content)

    title = _resolve_title(fm, parsed.content)
    description = fm.get("description")
    if not (isinstance(description, str) and description.strip()):
        description = title

    default_image_id = None
    if "mainImage" not in fm:
        default_image_id = _resolve_default_image(cms)
    fields = generate_missing_fields(fm, title, default_image_id)

    categories = _resolve_categories(cms, selector, title, description, parsed.content, fields["categories"])

    if not fields["mainImage"]:
        raise MissingImageError(
            "mainImage is required but no default image is available in Sanity. "
            "Please provide an image in the frontmatter or upload an image to Sanity."
        )

    candidate: dict[str, Any] = {
        "_type": "post",
        "title": title,
        "description": description,
        "type": fields["type"],
        "isHome": fields["isHome"],
        "slug": fields["slug"],
        "mainImage": fields["mainImage"],
        "categories": categories,
        "body": body,
    }
    for name in PASSTHROUGH_FIELDS:
        if name in fm and fm[name] is not None:
            candidate[name] = fm[name]

    result = validate_post(candidate)
    if not result.ok:
        raise PostValidationError(result.errors, result.summary())
    return result.post


# --- publish ---

def run_publish(cms: SanityClient, post: Post) -> str:
    """Create the post in the CMS and return its document id."""
    document_id = cms.create_document(post.to_document())
    logger.info("Published post %r as %s", post.title, document_id)
    return document_id
