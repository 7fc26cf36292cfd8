"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- item: Catalog item schemas
- collection: Collection schemas
- membership: Add / reorder requests and member responses

Usage:
======
    from encore.shared.schemas import ReorderRequest, MemberResponse
"""

from encore.shared.schemas.common import (
    MAX_ID,
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from encore.shared.schemas.item import (
    ItemCreate,
    ItemUpdate,
    ItemResponse,
)
from encore.shared.schemas.collection import (
    CollectionCreate,
    CollectionRename,
    CollectionResponse,
)
from encore.shared.schemas.membership import (
    AddMemberRequest,
    ReorderEntry,
    ReorderRequest,
    MemberResponse,
)

__all__ = [
    # Common
    "MAX_ID",
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Items
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    # Collections
    "CollectionCreate",
    "CollectionRename",
    "CollectionResponse",
    # Membership
    "AddMemberRequest",
    "ReorderEntry",
    "ReorderRequest",
    "MemberResponse",
]
