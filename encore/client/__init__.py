"""
Client Module

Client-side pieces for drag-and-drop reordering against the Encore API.

Components:
===========
- Ordering: Immutable sequence of item ids with array-move semantics
- MembersApiAdapter: httpx client for the membership endpoints
- ReorderController: Optimistic reorder with server reconciliation

Usage:
======
    adapter = MembersApiAdapter("http://localhost:8000")
    controller = ReorderController(adapter, collection_id=3)
    await controller.load()
    ok = await controller.drop(2, 0)
"""

from encore.client.ordering import Ordering
from encore.client.api_adapter import MembersApiAdapter
from encore.client.reorder_controller import ReorderController

__all__ = [
    "Ordering",
    "MembersApiAdapter",
    "ReorderController",
]
