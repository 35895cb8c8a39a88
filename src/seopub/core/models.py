"""Article and parse-result models shared by the pipelines"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


WORDS_PER_MINUTE = 200


class Article(BaseModel):
    """Raw scraped article; never mutated once created."""
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    date: str                       # YYYY-MM-DD


class ArticleMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str
    date: str
    reading_time: int = Field(..., ge=0, alias="readingTime")
    word_count: int = Field(..., ge=0, alias="wordCount")
    tags: Optional[list[str]] = None
    keywords: Optional[list[str]] = None
    author: Optional[str] = None
    seo_title: Optional[str] = Field(default=None, alias="seoTitle")


class EnrichedArticle(Article):
    """Article plus SEO metadata derived from its final content."""
    metadata: ArticleMetadata


@dataclass(frozen=True)
class ParsedMarkdown:
    """Frontmatter mapping and body text split from a Markdown document."""
    frontmatter: dict[str, Any] = field(default_factory=dict)
    content: str = ""


def count_words(content: str) -> int:
    """Number of whitespace-delimited tokens in content."""
    return len(content.split())


def reading_stats(content: str) -> tuple[int, int]:
    """Return (reading_time_minutes, word_count) for content at WORDS_PER_MINUTE."""
    words = count_words(content)
    return math.ceil(words / WORDS_PER_MINUTE), words
