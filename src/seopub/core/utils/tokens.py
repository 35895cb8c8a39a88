"""Shared markdown-it token utilities"""

from markdown_it import MarkdownIt


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def first_heading(markdown: str, level: int = 1) -> str | None:
    """Return the inline text of the first heading at `level`, or None."""
    tokens = MarkdownIt("commonmark").parse(markdown)
    for i, tok in enumerate(tokens):
        if heading_level(tok) == level and i + 1 < len(tokens):
            text = tokens[i + 1].content.strip()
            if text:
                return text
    return None
