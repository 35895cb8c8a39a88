"""Markdown -> Sanity post endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from seopub.api.deps import Services, get_services
from seopub.core import frontmatter
from seopub.core.pipeline import run_assemble, run_publish


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/markdown-to-sanity", tags=["markdown"])

BAD_BODY = (
    "Request body must contain either 'filePath' (string) or 'markdown' (string) "
    "with optional 'frontmatter'"
)


def parse_request(body: Any) -> dict[str, Any] | None:
    """Normalize the two accepted body shapes; None when neither matches."""
    if not isinstance(body, dict):
        return None
    publish = body.get("publish") is True
    if isinstance(body.get("filePath"), str):
        return {"filePath": body["filePath"], "publish": publish}
    if isinstance(body.get("markdown"), str):
        fm = body.get("frontmatter")
        return {
            "markdown": body["markdown"],
            "frontmatter": fm if isinstance(fm, dict) else None,
            "publish": publish,
        }
    return None


@router.post("/")
def markdown_to_sanity(
    services: Annotated[Services, Depends(get_services)],
    body: Annotated[Any, Body()] = None,
):
    """Convert Markdown (inline or from a file) into a validated post, optionally publishing it.

    Returns 201 with the new document id when `publish` is true and a Sanity
    client is configured, otherwise 200 with the unpublished post.
    """
    request = parse_request(body)
    if request is None:
        return JSONResponse({"error": BAD_BODY}, status_code=400)

    try:
        if "filePath" in request:
            parsed = frontmatter.parse_file(request["filePath"])
            markdown, fm = parsed.content, parsed.frontmatter
        else:
            markdown, fm = request["markdown"], request["frontmatter"]

        post = run_assemble(markdown, services.converter, services.cms, services.selector, frontmatter=fm)

        if request["publish"] and services.cms is not None:
            document_id = run_publish(services.cms, post)
            return JSONResponse(
                {"success": True, "post": post.to_document(), "documentId": document_id, "published": True},
                status_code=201,
            )
    except Exception as e:
        logger.exception("Markdown to Sanity conversion error")
        return JSONResponse({"error": str(e) or "Failed to convert markdown to Sanity post"}, status_code=500)

    return JSONResponse({"success": True, "post": post.to_document(), "published": False}, status_code=200)
