"""Post and content-block schema with a non-raising validation entry point

Field names follow the CMS document shape (`_type`, `_key`, `_ref`, camelCase
keys); pydantic aliases map them onto Python attribute names. Unknown input
keys are ignored.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)


_URL = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Reject malformed URLs while keeping the original string untouched."""
    try:
        _URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"{value!r} is not a valid URL") from e
    return value


Url = Annotated[str, AfterValidator(_check_url)]
UnitFloat = Annotated[float, Field(ge=0, le=1)]


class CMSModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_document(self) -> dict[str, Any]:
        """JSON-ready dict using CMS field names, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- primitives ---

class Reference(CMSModel):
    type_: Literal["reference"] = Field("reference", alias="_type")
    ref: str = Field(..., alias="_ref")


class Slug(CMSModel):
    type_: Literal["slug"] = Field("slug", alias="_type")
    current: str = Field(..., max_length=96)


class ImageCrop(CMSModel):
    top: UnitFloat
    bottom: UnitFloat
    left: UnitFloat
    right: UnitFloat


class ImageHotspot(CMSModel):
    x: UnitFloat
    y: UnitFloat
    height: UnitFloat
    width: UnitFloat


class Image(CMSModel):
    type_: Literal["image"] = Field("image", alias="_type")
    asset: Reference
    crop: Optional[ImageCrop] = None
    hotspot: Optional[ImageHotspot] = None


# --- content blocks ---

class InternalLink(CMSModel):
    type_: Literal["internalLink"] = Field(..., alias="_type")
    key: str = Field(..., alias="_key")
    reference: Reference


class ExternalLink(CMSModel):
    type_: Literal["link"] = Field(..., alias="_type")
    key: str = Field(..., alias="_key")
    href: Url


MarkDef = Annotated[Union[InternalLink, ExternalLink], Field(discriminator="type_")]


class Span(CMSModel):
    type_: Literal["span"] = Field("span", alias="_type")
    text: str
    marks: Optional[list[str]] = None


class TextBlock(CMSModel):
    type_: Literal["block"] = Field(..., alias="_type")
    key: Optional[str] = Field(None, alias="_key")
    style: Optional[Literal["normal", "h1", "h2", "h3", "h4", "blockquote"]] = None
    list_item: Optional[Literal["bullet"]] = Field(None, alias="listItem")
    mark_defs: Optional[list[MarkDef]] = Field(None, alias="markDefs")
    children: list[Span] = Field(..., min_length=1)
    level: Optional[Union[int, float]] = None


class ImageBlock(CMSModel):
    type_: Literal["mainImage"] = Field(..., alias="_type")
    key: Optional[str] = Field(None, alias="_key")
    asset: Reference
    crop: Optional[ImageCrop] = None
    hotspot: Optional[ImageHotspot] = None
    caption: Optional[str] = None
    alt: Optional[str] = None


class CodeBlock(CMSModel):
    type_: Literal["code"] = Field(..., alias="_type")
    key: Optional[str] = Field(None, alias="_key")
    code: str
    language: Optional[str] = None
    filename: Optional[str] = None
    highlighted_lines: Optional[list[Union[int, float]]] = Field(None, alias="highlightedLines")


class YouTubeEmbed(CMSModel):
    type_: Literal["youtube"] = Field(..., alias="_type")
    key: Optional[str] = Field(None, alias="_key")
    url: Url


ContentBlock = Annotated[
    Union[TextBlock, ImageBlock, CodeBlock, YouTubeEmbed],
    Field(discriminator="type_"),
]


# --- SEO ---

class QuestionAnswer(CMSModel):
    type_: Literal["questionsAnswers"] = Field(..., alias="_type")
    key: Optional[str] = Field(None, alias="_key")
    question: str
    answer: str


class OpenGraph(CMSModel):
    type_: Literal["openGraph"] = Field(..., alias="_type")
    title: Optional[str] = Field(None, max_length=60)
    description: Optional[str] = Field(None, max_length=160)
    image: Optional[Image] = None
    type: Optional[Literal["website", "article", "profile"]] = Field(None)


# --- post ---

class Post(CMSModel):
    """A publishable post document."""
    type_: Literal["post"] = Field(..., alias="_type")
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: Literal["definition", "post"]
    is_home: bool = Field(..., alias="isHome")
    slug: Slug
    main_image: Image = Field(..., alias="mainImage")
    categories: list[Reference] = Field(..., min_length=1)
    body: list[ContentBlock] = Field(..., min_length=1)

    seo_title: Optional[str] = Field(None, max_length=60, alias="seoTitle")
    seo_description: Optional[str] = Field(None, max_length=160, alias="seoDescription")
    seo_image: Optional[Image] = Field(None, alias="seoImage")
    seo_keywords: Optional[str] = Field(None, alias="seoKeywords")
    no_index: Optional[bool] = Field(None, alias="noIndex")
    canonical_url: Optional[Url] = Field(None, alias="canonicalUrl")
    questions_answers: Optional[list[QuestionAnswer]] = Field(None, alias="questionsAnswers")
    open_graph: Optional[OpenGraph] = Field(None, alias="openGraph")

    id: Optional[str] = Field(None, alias="_id")
    rev: Optional[str] = Field(None, alias="_rev")
    created_at: Optional[str] = Field(None, alias="_createdAt")
    updated_at: Optional[str] = Field(None, alias="_updatedAt")


# --- validation ---

@dataclass(frozen=True)
class FieldError:
    path: str
    message: str


@dataclass
class ValidationResult:
    post: Optional[Post] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.post is not None

    def summary(self) -> str:
        return ", ".join(f"{e.path}: {e.message}" for e in self.errors)


def _error_path(loc: tuple, candidate: Any) -> str:
    """Dotted document path for a pydantic error location, without union tag segments."""
    parts = []
    node = candidate
    after_index = False
    for part in loc:
        # Discriminated list items carry their matched `_type` right after the index
        if after_index and isinstance(node, dict) and node.get("_type") == part:
            after_index = False
            continue
        after_index = isinstance(part, int)
        parts.append(str(part))
        if isinstance(node, dict):
            node = node.get(part)
        elif isinstance(node, list) and isinstance(part, int) and 0 <= part < len(node):
            node = node[part]
        else:
            node = None
    return ".".join(parts)


def _error_message(err: dict) -> str:
    if err["type"] == "missing":
        return f"{err['loc'][-1]} is required"
    return err["msg"]


def validate_post(candidate: Any) -> ValidationResult:
    """Validate untyped data as a Post. Never raises; failures come back as field errors."""
    try:
        return ValidationResult(post=Post.model_validate(candidate))
    except ValidationError as e:
        return ValidationResult(errors=[
            FieldError(path=_error_path(err["loc"], candidate), message=_error_message(err))
            for err in e.errors()
        ])
