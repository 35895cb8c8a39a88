"""LLM-based category selection for posts"""

import logging
from typing import Any

from seopub.core.prompts import CATEGORY_EXCERPT_CHARS, CATEGORY_PROMPT


logger = logging.getLogger(__name__)


def format_categories(categories: list[dict[str, Any]]) -> str:
    """Numbered 'Title (ID: id)' lines for the prompt."""
    return "\n".join(
        f"{i}. {cat.get('title', '')} (ID: {cat['_id']})"
        for i, cat in enumerate(categories, 1)
    )


class CategorySelector:
    """Chooses the best-matching category id for a post."""

    def __init__(self, llm):
        self.llm = llm

    def select_category(
        self,
        title: str,
        description: str,
        content: str,
        categories: list[dict[str, Any]],
        ) -> str:
        """Return a category `_id` from `categories`.

        Falls back to the first category when the reply names an unknown id or
        the call fails. Raises ValueError when `categories` is empty.
        """
        if not categories:
            raise ValueError("No categories available")
        fallback = categories[0]["_id"]

        prompt = CATEGORY_PROMPT.format(
            title=title,
            description=description,
            excerpt=content[:CATEGORY_EXCERPT_CHARS],
            categories=format_categories(categories),
        )
        try:
            selected = self.llm.complete(prompt, max_tokens=200, temperature=0.3).strip()
        except Exception as e:
            logger.error("Category selection failed, using first category %r: %s", fallback, e)
            return fallback

        known = {cat["_id"] for cat in categories}
        if selected in known:
            return selected
        logger.warning(
            "Selected category id %r not found, using first category %r (available: %s)",
            selected, fallback, sorted(known),
        )
        return fallback
