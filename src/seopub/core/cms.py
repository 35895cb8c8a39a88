"""Sanity content-store client over the HTTP API"""

import json
import logging
from typing import Any, Optional

import requests

from seopub.errors import CMSError


logger = logging.getLogger(__name__)

CATEGORIES_QUERY = '*[_type == "category"] { _id, title, slug } | order(title asc)'
LATEST_IMAGE_QUERY = '*[_type == "sanity.imageAsset"] | order(_createdAt desc) [0]._id'


class SanityClient:
    """Creates documents and runs GROQ queries against one Sanity dataset."""

    def __init__(
        self,
        project_id: str,
        dataset: str,
        token: str,
        api_version: str = "2024-01-01",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        ):
        if not project_id:
            raise ValueError("Sanity project id is not set.")
        if not token:
            raise ValueError("Sanity API token is not set.")
        self.dataset = dataset
        self.base_url = f"https://{project_id}.api.sanity.io/v{api_version.lstrip('v')}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

    def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            if getattr(e, "response", None) is not None:
                logger.debug("Sanity response body: %s", e.response.text)
            raise

    def query(self, groq: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Run a GROQ query and return its `result`. Parameter values are sent JSON-encoded."""
        query_params = {"query": groq}
        for name, value in (params or {}).items():
            query_params[f"${name}"] = json.dumps(value)
        data = self._request("GET", f"/data/query/{self.dataset}", params=query_params)
        return data.get("result")

    def create_document(self, document: dict[str, Any]) -> str:
        """Create a document and return its id."""
        try:
            data = self._request(
                "POST",
                f"/data/mutate/{self.dataset}",
                params={"returnIds": "true"},
                json={"mutations": [{"create": document}]},
            )
            return data["results"][0]["id"]
        except (requests.exceptions.RequestException, KeyError, IndexError, ValueError) as e:
            raise CMSError(f"Failed to create document in Sanity: {e}") from e

    def get_categories(self) -> list[dict[str, Any]]:
        """All category documents as {_id, title, slug}, ordered by title."""
        try:
            return self.query(CATEGORIES_QUERY) or []
        except (requests.exceptions.RequestException, ValueError) as e:
            raise CMSError(f"Failed to fetch categories from Sanity: {e}") from e

    def get_default_image(self) -> Optional[str]:
        """Asset id of the most recently created image, or None if there is none or the query fails."""
        try:
            return self.query(LATEST_IMAGE_QUERY) or None
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("Failed to fetch default image from Sanity: %s", e)
            return None
