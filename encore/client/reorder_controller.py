"""
Reorder Controller

Holds the member list a UI is currently showing for one collection and
turns drag-and-drop gestures into reorder requests.

Drop Flow:
==========
    drop(2, 0)
        │
        ├─ same index?  → nothing to do
        │
        ├─ new Ordering = current.move(2, 0)
        ├─ members shown in the new order immediately (optimistic)
        ├─ PUT .../members/reorder with the full ordering
        │
        ├─ success → members = server response
        └─ failure → optimistic list thrown away, members refetched
                     from the server, error set, drop() returns False

The controller never merges local and server state: after any request the
server's answer is what is shown.
"""

from typing import Any, Dict, List, Optional

from encore.client.api_adapter import MembersApiAdapter
from encore.client.ordering import Ordering
from encore.shared.core.exceptions import ExternalServiceError
from encore.shared.core.logging import get_logger

logger = get_logger(__name__)


class ReorderController:
    """
    Optimistic reordering of one collection's members.

    Attributes:
        collection_id: Collection being displayed
        members: Member dicts in display order
        error: Last failure, cleared by the next successful request
        pending: True while a reorder request is in flight
    """

    def __init__(self, adapter: MembersApiAdapter, collection_id: int):
        self.adapter = adapter
        self.collection_id = collection_id
        self.members: List[Dict[str, Any]] = []
        self.error: Optional[ExternalServiceError] = None
        self.pending = False

    @property
    def ordering(self) -> Ordering:
        """Item ids currently displayed, in order."""
        return Ordering.of(member["id"] for member in self.members)

    async def load(self) -> List[Dict[str, Any]]:
        """
        Fetch the members from the server and display them.

        Raises:
            ExternalServiceError: If the listing fails
        """
        self.members = await self.adapter.list_members(self.collection_id)
        self.error = None
        return self.members

    async def drop(self, source_index: int, destination_index: int) -> bool:
        """
        Move the member at source_index to destination_index.

        Returns:
            True if the server accepted the new order (or nothing moved),
            False if it was rejected and the list was reloaded

        Raises:
            ValueError: If an index is outside the displayed list
        """
        if source_index == destination_index:
            return True

        target = self.ordering.move(source_index, destination_index)
        confirmed = self.members
        by_id = {member["id"]: member for member in confirmed}

        self.members = [by_id[item_id] for item_id in target.item_ids]
        self.pending = True
        try:
            self.members = await self.adapter.reorder(self.collection_id, target)
            self.error = None
            return True
        except ExternalServiceError as e:
            logger.warning(
                "Reorder rejected, reloading members",
                collection_id=self.collection_id,
                status_code=e.upstream_status,
                error=e.message,
            )
            self.error = e
            await self._reconcile(confirmed)
            return False
        finally:
            self.pending = False

    async def _reconcile(self, confirmed: List[Dict[str, Any]]) -> None:
        try:
            self.members = await self.adapter.list_members(self.collection_id)
        except ExternalServiceError as e:
            # Server unreachable: fall back to the last list it confirmed
            logger.error(
                "Reload after failed reorder also failed",
                collection_id=self.collection_id,
                error=e.message,
            )
            self.members = confirmed
