"""Base client module for Tempo API interactions."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from atlassian.rest_client import AtlassianRestAPI
from requests.exceptions import HTTPError

from ..exceptions import UpstreamError
from ..utils.logging import mask_sensitive
from .config import TempoConfig

logger = logging.getLogger("mcp-jira-tempo.tempo")

R = TypeVar("R")

API_VERSION = "4"


class TempoClient:
    """Base client for Tempo Cloud REST API v4 interactions."""

    config: TempoConfig

    def __init__(self, config: TempoConfig | None = None) -> None:
        """Initialize the Tempo client.

        Args:
            config: Optional configuration object (will use env vars if not provided)
        """
        self.config = config or TempoConfig.from_env()

        logger.debug(
            f"Creating Tempo client for {self.config.url} "
            f"(token {mask_sensitive(self.config.api_token)})"
        )
        self.tempo = AtlassianRestAPI(
            url=self.config.url,
            token=self.config.api_token,
            cloud=True,
        )

    @staticmethod
    def _path(resource: str) -> str:
        return f"{API_VERSION}/{resource.lstrip('/')}"

    def _call(self, operation: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Run one Tempo API call, translating HTTP failures into UpstreamError."""
        try:
            return operation(*args, **kwargs)
        except HTTPError as http_err:
            error = UpstreamError.from_http_error("Tempo", http_err)
            logger.debug(f"Tempo call failed: {error}")
            raise error from http_err

    def get_json(self, resource: str, params: dict[str, Any] | None = None) -> dict:
        """GET a single Tempo resource and return its JSON object."""
        data = self._call(self.tempo.get, self._path(resource), params=params)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise UpstreamError(
                "Tempo", None, f"Unexpected response for {resource}: {str(data)[:200]}"
            )
        return data

    def post_json(self, resource: str, body: dict[str, Any]) -> dict:
        """POST a JSON body to a Tempo resource and return the JSON answer."""
        data = self._call(self.tempo.post, self._path(resource), data=body)
        if not isinstance(data, dict):
            raise UpstreamError(
                "Tempo", None, f"Unexpected response for {resource}: {str(data)[:200]}"
            )
        return data

    def get_paged(
        self, resource: str, params: dict[str, Any] | None = None
    ) -> list[dict]:
        """
        Fetch every page of a Tempo list endpoint.

        Follows the absolute ``metadata.next`` URL of each page until the
        server stops sending one, so the caller always gets the full,
        ordered result set. The page size in ``params`` only controls how
        many items each request returns.

        Args:
            resource: Resource path relative to the API version, e.g. "worklogs"
            params: Query parameters for the first page

        Returns:
            All ``results`` items of all pages, in server order

        Raises:
            UpstreamError: If any page fails
        """
        data = self.get_json(resource, params=params)
        results: list[dict] = list(data.get("results") or [])
        next_url = (data.get("metadata") or {}).get("next")
        pages = 1

        while next_url:
            page = self._call(self.tempo.get, next_url, absolute=True)
            if not isinstance(page, dict):
                raise UpstreamError(
                    "Tempo", None, f"Unexpected page from {next_url}: {str(page)[:200]}"
                )
            results.extend(page.get("results") or [])
            next_url = (page.get("metadata") or {}).get("next")
            pages += 1

        logger.debug(f"Fetched {len(results)} items from {resource} in {pages} page(s)")
        return results
