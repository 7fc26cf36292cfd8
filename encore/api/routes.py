"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live                 → Health check endpoints
    /items                                 → Catalog items (CRUD)
    /collections                           → Collections (CRUD)
    /collections/{collection_id}/members   → Ordered membership

Usage:
======
    from encore.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from encore.api.handlers import (
    collection_handler,
    health_handler,
    item_handler,
    membership_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Catalog items
    app.include_router(
        item_handler.router,
        prefix="/items",
        tags=["Items"],
    )

    # Collections
    app.include_router(
        collection_handler.router,
        prefix="/collections",
        tags=["Collections"],
    )

    # Collection membership
    app.include_router(
        membership_handler.router,
        prefix="/collections/{collection_id}/members",
        tags=["Membership"],
    )
