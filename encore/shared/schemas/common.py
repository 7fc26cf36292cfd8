"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, camelCase aliases)
- Error responses: ErrorDetail, ErrorResponse
- Health: HealthResponse

JSON Field Names:
=================
All API payloads use camelCase on the wire. Input also accepts the
snake_case field names:

    class MemberResponse(BaseSchema):
        added_at: datetime          # serialized as "addedAt"

    AddMemberRequest.model_validate({"itemId": 7})    # ok
    AddMemberRequest.model_validate({"item_id": 7})   # ok
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Ids are 32-bit signed INTEGER columns
MAX_ID = 2**31 - 1


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    - alias_generator: camelCase aliases for every field
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "ORDERING_MISMATCH",
                "message": "Ordering must list every member of the collection exactly once",
                "details": {"missing_item_ids": [12], "unknown_item_ids": []}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "encore"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
