"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from encore.shared.core.logging import logger, get_logger
    from encore.shared.core.exceptions import EncoreException, NotFoundError

    logger.info("Starting operation", collection_id=collection_id)
"""

from encore.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from encore.shared.core.exceptions import (
    EncoreException,
    NotFoundError,
    CollectionNotFoundError,
    ItemNotFoundError,
    MembershipNotFoundError,
    ValidationError,
    OrderingMismatchError,
    ConflictError,
    DuplicateResourceError,
    AlreadyMemberError,
    StorageError,
    ConstraintViolationError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "EncoreException",
    "NotFoundError",
    "CollectionNotFoundError",
    "ItemNotFoundError",
    "MembershipNotFoundError",
    "ValidationError",
    "OrderingMismatchError",
    "ConflictError",
    "DuplicateResourceError",
    "AlreadyMemberError",
    "StorageError",
    "ConstraintViolationError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
