"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    EncoreException (base, 500)
       │
       ├── NotFoundError (404)              ← Resource not found
       │      ├── CollectionNotFoundError
       │      ├── ItemNotFoundError
       │      └── MembershipNotFoundError
       ├── ValidationError (400)            ← Invalid input data
       ├── OrderingMismatchError (422)      ← Reorder list != current members
       ├── ConflictError (409)              ← Operation conflicts with current state
       │      └── DuplicateResourceError
       │             └── AlreadyMemberError
       ├── StorageError (500)               ← Storage layer failure
       │      └── ConstraintViolationError  ← Unique / foreign key violation
       └── ServiceUnavailableError (503)    ← Database or remote API down
              └── ExternalServiceError

Usage:
======
    from encore.shared.core.exceptions import CollectionNotFoundError

    raise CollectionNotFoundError(collection_id)
    # {"error": {"code": "NOT_FOUND", "message": "Collection with id '3' not found", "details": {}}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "CONFLICT",
            "message": "Item is already in this collection",
            "details": {"collection_id": 3, "item_id": 7}
        }
    }
"""

from typing import Any, Optional


class EncoreException(Exception):
    """
    Base exception for all Encore application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(EncoreException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Item", 42)
        # Message: "Item with id '42' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class CollectionNotFoundError(NotFoundError):
    """Collection (setlist) not found error."""

    def __init__(self, collection_id: int) -> None:
        super().__init__(resource="Collection", resource_id=collection_id)


class ItemNotFoundError(NotFoundError):
    """Item (song) not found error."""

    def __init__(self, item_id: int) -> None:
        super().__init__(resource="Item", resource_id=item_id)


class MembershipNotFoundError(NotFoundError):
    """Item exists but is not a member of the collection."""

    def __init__(self, collection_id: int, item_id: int) -> None:
        super().__init__(
            resource="Item in collection",
            details={"collection_id": collection_id, "item_id": item_id},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409, 422)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(EncoreException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class OrderingMismatchError(EncoreException):
    """
    Reorder request does not describe the current membership (422).

    Raised when the submitted ordering has duplicates, leaves out a
    current member, or names an item that is not a member. The whole
    reorder is rejected and nothing is written.
    """

    def __init__(
        self,
        message: str = "Ordering does not match the current collection members",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_code="ORDERING_MISMATCH",
            details=details,
        )


class ConflictError(EncoreException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Collection was modified concurrently, retry")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Conflict raised when creating a resource that already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


class AlreadyMemberError(DuplicateResourceError):
    """Item is already a member of the collection."""

    def __init__(self, collection_id: int, item_id: int) -> None:
        super().__init__(
            message="Item is already in this collection",
            details={"collection_id": collection_id, "item_id": item_id},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# STORAGE ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class StorageError(EncoreException):
    """
    Storage layer failure (500).

    The message is safe to show to clients; the underlying driver error
    is chained as ``__cause__`` and only logged.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR",
            details=details,
        )


class ConstraintViolationError(StorageError):
    """
    A write would break a uniqueness or referential constraint.

    Repositories raise this; services translate it into a domain error
    (Conflict, NotFound) where the cause is known.
    """

    def __init__(
        self,
        message: str = "Storage constraint violated",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(EncoreException):
    """
    Service temporarily unavailable error (503).

    Raised when the database or the remote API cannot be reached.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    Used by the client adapter when the Encore API answers with an error
    or cannot be reached. ``details["status_code"]`` carries the HTTP status
    when there was a response.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)

    @property
    def upstream_status(self) -> Optional[int]:
        """HTTP status returned by the remote service, if any."""
        return self.details.get("status_code")
