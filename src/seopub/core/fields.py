"""Defaults for the post fields a Markdown frontmatter usually lacks"""

from typing import Any, Optional

from seopub.core.utils.slug import slugify


DEFAULT_CATEGORY_REF = "category-default"


def reference(ref: str) -> dict[str, str]:
    return {"_type": "reference", "_ref": ref}


def make_slug(text: str) -> dict[str, str]:
    return {"_type": "slug", "current": slugify(text) or "untitled"}


def make_image(asset_id: Optional[str]) -> Optional[dict[str, Any]]:
    """Image object referencing asset_id, or None without an id."""
    if not asset_id:
        return None
    return {"_type": "image", "asset": reference(asset_id)}


def image_from_frontmatter(value: Any) -> Optional[dict[str, Any]]:
    """Accept an asset id string or an image mapping from frontmatter `mainImage`."""
    if isinstance(value, str):
        return make_image(value.strip())
    if isinstance(value, dict):
        return {"_type": "image", **value}
    return None


def default_categories() -> list[dict[str, str]]:
    return [reference(DEFAULT_CATEGORY_REF)]


def generate_missing_fields(
    frontmatter: dict[str, Any],
    title: str,
    default_image_id: Optional[str] = None,
    ) -> dict[str, Any]:
    """Slug, main image, categories, type and isHome for a post built from frontmatter.

    A non-empty frontmatter `slug` wins over one derived from `title`; a
    frontmatter `mainImage` wins over `default_image_id`.
    """
    slug = frontmatter.get("slug")
    return {
        "slug": make_slug(slug if isinstance(slug, str) and slug.strip() else title),
        "mainImage": image_from_frontmatter(frontmatter.get("mainImage")) or make_image(default_image_id),
        "categories": default_categories(),
        "type": "post",
        "isHome": False,
    }
