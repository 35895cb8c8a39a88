"""Markdown to content-block conversion through the LLM"""

import json
import logging
from typing import Any

from seopub.core.prompts import BLOCK_CONTENT_PROMPT
from seopub.core.utils.responses import strip_outer_fence
from seopub.errors import ConversionError


logger = logging.getLogger(__name__)


def parse_block_content(response: str) -> list[dict[str, Any]]:
    """Decode a block-content reply; raises ValueError unless it is a JSON array."""
    try:
        blocks = json.loads(strip_outer_fence(response, "json"))
    except ValueError as e:
        raise ValueError(f"Failed to parse OpenAI response as JSON: {e}") from e
    if not isinstance(blocks, list):
        raise ValueError(f"Expected a JSON array of blocks, got {type(blocks).__name__}")
    return blocks


class PortableTextConverter:
    """Converts a Markdown body into the content-block array of a post.

    There is no fallback: a post cannot exist without a body, so any failure
    is raised as ConversionError.
    """

    def __init__(self, llm):
        self.llm = llm

    def convert(self, markdown: str) -> list[dict[str, Any]]:
        try:
            response = self.llm.complete(
                BLOCK_CONTENT_PROMPT.format(markdown=markdown),
                max_tokens=4000,
                temperature=0.3,
            )
            blocks = parse_block_content(response)
        except Exception as e:
            raise ConversionError(f"OpenAI conversion failed: {e}") from e
        logger.debug("Converted markdown into %d blocks", len(blocks))
        return blocks
