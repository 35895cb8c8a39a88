"""Slug and filename generation for stored Markdown documents"""

import re


MAX_SLUG_LENGTH = 50


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text, flags=re.ASCII)
    text = re.sub(r'[\s_-]+', '-', text, flags=re.ASCII)
    return text.strip('-')


def generate_filename(title: str, date: str) -> str:
    """Return '{date}-{slug}.md' with the slug capped at MAX_SLUG_LENGTH characters."""
    slug = slugify(title) or "untitled"
    return f"{date}-{slug[:MAX_SLUG_LENGTH]}.md"
