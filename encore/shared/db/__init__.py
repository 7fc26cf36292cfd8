"""
Database Module

This module provides database connectivity and session management for Encore.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_db()                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              AsyncSession (from session.py)                 │          │
│   │  - One session per request                                  │          │
│   │  - Commit on success, rollback on exception                 │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Services → Repositories                        │          │
│   │  - ItemRepository                                           │          │
│   │  - CollectionRepository                                     │          │
│   │  - MembershipRepository (SAVEPOINT per multi-row write)     │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              PostgreSQL / SQLite                            │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Usage in FastAPI:
=================
    from fastapi import Depends
    from encore.shared.db import get_db
    from encore.shared.services import MembershipService

    @router.get("/collections/{collection_id}/members")
    async def list_members(collection_id: int, db: AsyncSession = Depends(get_db)):
        return await MembershipService(db).list_members(collection_id)
"""

from encore.shared.db.session import (
    get_db,
    init_db,
    close_db,
    ping_db,
    build_engine,
    build_session_factory,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "ping_db",
    "build_engine",
    "build_session_factory",
    "AsyncSessionLocal",
    "engine",
]
