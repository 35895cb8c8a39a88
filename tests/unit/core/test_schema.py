"""Unit tests for core/schema.py"""

import pytest

from seopub.core.schema import validate_post


@pytest.fixture(name="candidate")
def candidate_fixture():
    """A minimal valid post document."""
    return {
        "_type": "post",
        "title": "Hello",
        "description": "A post",
        "type": "post",
        "isHome": False,
        "slug": {"_type": "slug", "current": "hello"},
        "mainImage": {"_type": "image", "asset": {"_type": "reference", "_ref": "image-1"}},
        "categories": [{"_type": "reference", "_ref": "category-default"}],
        "body": [
            {"_type": "block", "_key": "b1", "style": "normal",
             "children": [{"_type": "span", "text": "Hi"}]},
        ],
    }


def test_validate_post_ok(candidate):
    """A complete candidate validates and keeps its CMS field names on output."""
    result = validate_post(candidate)
    assert result.ok
    assert result.errors == []
    doc = result.post.to_document()
    assert doc["isHome"] is False
    assert doc["mainImage"]["asset"]["_ref"] == "image-1"
    assert "seoTitle" not in doc


def test_validate_post_all_block_kinds(candidate):
    """Image, code, youtube and linked text blocks are accepted."""
    candidate["body"] += [
        {"_type": "mainImage", "asset": {"_type": "reference", "_ref": "image-2"}, "alt": "x"},
        {"_type": "code", "code": "x = 1", "language": "python", "highlightedLines": [1]},
        {"_type": "youtube", "url": "https://www.youtube.com/watch?v=abc"},
        {"_type": "block", "listItem": "bullet", "level": 1,
         "markDefs": [{"_type": "link", "_key": "l1", "href": "https://example.com"}],
         "children": [{"_type": "span", "text": "link", "marks": ["l1"]}]},
    ]
    assert validate_post(candidate).ok


def test_validate_post_missing_title(candidate):
    """A missing required field is reported as '<field> is required'."""
    del candidate["title"]
    result = validate_post(candidate)
    assert not result.ok
    assert [(e.path, e.message) for e in result.errors] == [("title", "title is required")]
    assert "title: title is required" in result.summary()


@pytest.mark.parametrize("field,value", [
    ("title", ""),
    ("type", "page"),
    ("categories", []),
    ("body", []),
    ("seoTitle", "x" * 61),
    ("seoDescription", "x" * 161),
    ("canonicalUrl", "not a url"),
])
def test_validate_post_rejects(candidate, field, value):
    """Constraint violations are returned as errors on the offending field."""
    candidate[field] = value
    result = validate_post(candidate)
    assert not result.ok
    assert result.errors[0].path.startswith(field)


def test_validate_post_unknown_block_type(candidate):
    """Blocks with an unknown _type are rejected."""
    candidate["body"] = [{"_type": "table", "rows": []}]
    result = validate_post(candidate)
    assert not result.ok
    assert result.errors[0].path.startswith("body.0")


def test_validate_post_bad_crop(candidate):
    """Crop values outside 0..1 are rejected."""
    candidate["mainImage"]["crop"] = {"top": 0, "bottom": 0, "left": 0, "right": 1.5}
    assert not validate_post(candidate).ok


def test_validate_post_seo_fields(candidate):
    """Optional SEO fields validate and serialize under their CMS names."""
    candidate.update(
        seoTitle="Short",
        noIndex=True,
        canonicalUrl="https://example.com/hello",
        questionsAnswers=[{"_type": "questionsAnswers", "question": "Q?", "answer": "A."}],
        openGraph={"_type": "openGraph", "title": "OG", "type": "article"},
    )
    doc = validate_post(candidate).post.to_document()
    assert doc["canonicalUrl"] == "https://example.com/hello"
    assert doc["openGraph"] == {"_type": "openGraph", "title": "OG", "type": "article"}
    assert doc["questionsAnswers"][0]["question"] == "Q?"


def test_validate_post_never_raises():
    """Non-mapping input comes back as errors."""
    result = validate_post("not a post")
    assert not result.ok
    assert result.errors


def test_validate_post_block_error_path(candidate):
    """Errors inside a body block point at the block's own field, not the union tag."""
    candidate["body"] = [{"_type": "block", "children": []}]
    result = validate_post(candidate)
    assert [e.path for e in result.errors] == ["body.0.children"]


def test_validate_post_mark_def_error_path(candidate):
    """Errors inside a mark definition use the document path."""
    candidate["body"][0]["markDefs"] = [{"_type": "link", "_key": "l1", "href": "not a url"}]
    result = validate_post(candidate)
    assert [e.path for e in result.errors] == ["body.0.markDefs.0.href"]


def test_validate_post_missing_block_field_message(candidate):
    """A missing field inside a code block is reported by name at its document path."""
    candidate["body"] = [{"_type": "code", "language": "python"}]
    result = validate_post(candidate)
    assert [(e.path, e.message) for e in result.errors] == [("body.0.code", "code is required")]


def test_validate_post_field_named_like_its_tag(candidate):
    """A bad field sharing its block's `_type` name keeps a single segment."""
    candidate["body"] = [{"_type": "code", "code": 5}]
    result = validate_post(candidate)
    assert [e.path for e in result.errors] == ["body.0.code"]
