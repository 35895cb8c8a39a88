"""Article enrichment: LLM restructuring and SEO metadata with best-effort fallbacks

Neither mode ever raises because the LLM failed. Under total LLM
unavailability the result is the original content with the title doubling as
the description; reading time and word count are always computed from the
final content.
"""

import logging
from typing import Any, Optional

from seopub.core import frontmatter
from seopub.core.models import Article, ArticleMetadata, EnrichedArticle, reading_stats
from seopub.core.prompts import (
    COMBINED_PROMPT,
    CONTENT_PROMPT,
    METADATA_EXCERPT_CHARS,
    METADATA_PROMPT,
)
from seopub.core.utils.responses import parse_combined, parse_json_payload, strip_outer_fence


logger = logging.getLogger(__name__)

ENRICH_MODES = ("combined", "split")


def _empty_metadata() -> dict[str, Any]:
    return {"description": None, "tags": [], "keywords": [], "author": None, "seoTitle": None}


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value.strip() else None


def parse_metadata_response(response: str) -> dict[str, Any]:
    """Decode the metadata-call reply into the default-shaped mapping; raises ValueError if not JSON."""
    data = parse_json_payload(response)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return {
        "description": _optional_str(data.get("description")),
        "tags": _string_list(data.get("tags")),
        "keywords": _string_list(data.get("keywords")),
        "author": _optional_str(data.get("author")),
        "seoTitle": _optional_str(data.get("seoTitle")),
    }


def build_frontmatter(enriched: EnrichedArticle) -> dict[str, Any]:
    """Frontmatter for an enriched article; optional fields only when they carry a value."""
    meta = enriched.metadata
    fm: dict[str, Any] = {
        "title": meta.title,
        "description": meta.description,
        "date": meta.date,
        "readingTime": meta.reading_time,
        "wordCount": meta.word_count,
    }
    if meta.tags:
        fm["tags"] = list(meta.tags)
    if meta.keywords:
        fm["keywords"] = list(meta.keywords)
    if meta.author:
        fm["author"] = meta.author
    if meta.seo_title:
        fm["seoTitle"] = meta.seo_title
    return fm


def format_markdown(enriched: EnrichedArticle) -> str:
    """Serialize an enriched article as frontmatter + Markdown body."""
    return frontmatter.serialize(enriched.content, build_frontmatter(enriched))


class ArticleEnricher:
    """Turns a scraped Article into SEO Markdown using a completion client."""

    def __init__(self, llm, mode: str = "combined"):
        if mode not in ENRICH_MODES:
            raise ValueError(f"Unknown enrich mode {mode!r}; expected one of {ENRICH_MODES}")
        self.llm = llm
        self.mode = mode

    def _metadata(self, article: Article) -> dict[str, Any]:
        prompt = METADATA_PROMPT.format(
            title=article.title,
            excerpt=article.content[:METADATA_EXCERPT_CHARS],
        )
        try:
            return parse_metadata_response(self.llm.complete(prompt, max_tokens=500, temperature=0.7))
        except Exception as e:
            logger.error("Metadata generation failed, using empty metadata: %s", e)
            return _empty_metadata()

    def _restructure(self, article: Article) -> str:
        prompt = CONTENT_PROMPT.format(title=article.title, content=article.content)
        try:
            return self.llm.complete(prompt, max_tokens=4000, temperature=0.7).strip()
        except Exception as e:
            logger.error("Content transformation failed, using original content: %s", e)
            return article.content

    def enrich(self, article: Article) -> EnrichedArticle:
        """Two sequential calls: metadata from an excerpt, then restructured content."""
        meta = self._metadata(article)
        content = self._restructure(article)
        reading_time, word_count = reading_stats(content)
        return EnrichedArticle(
            title=article.title,
            content=content,
            date=article.date,
            metadata=ArticleMetadata(
                title=article.title,
                description=meta["description"] or article.title,
                date=article.date,
                reading_time=reading_time,
                word_count=word_count,
                tags=meta["tags"],
                keywords=meta["keywords"],
                author=meta["author"],
                seo_title=meta["seoTitle"],
            ),
        )

    def transform_to_markdown(self, article: Article) -> str:
        """Single delimited call producing both content and metadata; see parse_combined."""
        content = article.content
        meta: dict[str, Any] = {}
        try:
            response = self.llm.complete(
                COMBINED_PROMPT.format(title=article.title, content=article.content),
                max_tokens=4000,
                temperature=0.7,
            )
            parsed_content, meta = parse_combined(strip_outer_fence(response, "markdown"))
            content = parsed_content or article.content
        except ValueError as e:
            logger.error("Error parsing combined response, using original content: %s", e)
            meta = {}
        except Exception as e:
            logger.error("Combined transformation failed, using original content: %s", e)
            meta = {}

        reading_time, word_count = reading_stats(content)
        fm: dict[str, Any] = {
            "title": _optional_str(meta.get("translatedTitle")) or article.title,
            "description": _optional_str(meta.get("description")) or article.title,
            "date": article.date,
            "readingTime": reading_time,
            "wordCount": word_count,
        }
        if seo_title := _optional_str(meta.get("seoTitle")):
            fm["seoTitle"] = seo_title
        return frontmatter.serialize(content, fm)

    def to_markdown(self, article: Article) -> str:
        """Render the article as Markdown using the configured mode."""
        if self.mode == "split":
            return format_markdown(self.enrich(article))
        return self.transform_to_markdown(article)
