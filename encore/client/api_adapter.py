"""
Members API adapter - HTTP client for the membership endpoints.

Provides:
- Listing the ordered members of a collection
- Adding and removing members
- Submitting a full reorder in one request

Every failure (error status or transport problem) is raised as
ExternalServiceError; details["status_code"] holds the HTTP status when the
server answered, and details["error"] the server's error payload.
"""

from typing import Any, Dict, List, Optional

import httpx

from encore.client.ordering import Ordering
from encore.config.settings import settings
from encore.shared.core.exceptions import ExternalServiceError
from encore.shared.core.logging import get_logger

logger = get_logger(__name__)


class MembersApiAdapter:
    """
    Adapter for the Encore membership API.

    Handles:
    - Request construction for the four membership endpoints
    - Mapping HTTP and transport errors onto ExternalServiceError
    """

    SERVICE_NAME = "encore-api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the adapter.

        Args:
            base_url: API root. If not provided, uses settings.
            timeout: Request timeout in seconds. If not provided, uses settings.
            client: Pre-built httpx client (takes precedence over base_url/timeout)
        """
        self.base_url = base_url or settings.API_BASE_URL
        self.timeout = timeout or settings.API_TIMEOUT_SECONDS
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-loaded httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Encore API unreachable", method=method, path=path, error=str(e))
            raise ExternalServiceError(
                self.SERVICE_NAME,
                f"Request to {path} failed: {e}",
            ) from e

        if response.is_error:
            error = None
            if response.headers.get("content-type", "").startswith("application/json"):
                body = response.json()
                if isinstance(body, dict) and isinstance(body.get("error"), dict):
                    error = body["error"]
            logger.warning(
                "Encore API returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ExternalServiceError(
                self.SERVICE_NAME,
                (error or {}).get("message") or f"{method} {path} returned {response.status_code}",
                details={"status_code": response.status_code, "error": error},
            )
        return response

    @staticmethod
    def _members_path(collection_id: int) -> str:
        return f"/collections/{collection_id}/members"

    async def list_members(self, collection_id: int) -> List[Dict[str, Any]]:
        """
        Get the members of a collection in order.

        Returns:
            List of member dicts (camelCase keys, as returned by the API)

        Raises:
            ExternalServiceError: If the request fails
        """
        response = await self._request("GET", self._members_path(collection_id))
        return response.json()

    async def add_member(self, collection_id: int, item_id: int) -> Dict[str, Any]:
        """Append an item to a collection; returns the new member."""
        response = await self._request(
            "POST",
            self._members_path(collection_id),
            json={"itemId": item_id},
        )
        return response.json()

    async def remove_member(self, collection_id: int, item_id: int) -> None:
        """Remove an item from a collection."""
        await self._request("DELETE", f"{self._members_path(collection_id)}/{item_id}")

    async def reorder(self, collection_id: int, ordering: Ordering) -> List[Dict[str, Any]]:
        """
        Submit a complete ordering.

        Args:
            collection_id: Collection id
            ordering: Every member, in the desired order

        Returns:
            The members as ordered by the server

        Raises:
            ExternalServiceError: If the server rejects the ordering or
                cannot be reached
        """
        response = await self._request(
            "PUT",
            f"{self._members_path(collection_id)}/reorder",
            json=ordering.to_payload(),
        )
        return response.json()
