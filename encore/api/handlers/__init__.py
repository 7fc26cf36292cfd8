"""
API Handlers

Route handlers for the Encore API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from encore.api.handlers import (
    collection_handler,
    health_handler,
    item_handler,
    membership_handler,
)

__all__ = [
    "collection_handler",
    "health_handler",
    "item_handler",
    "membership_handler",
]
