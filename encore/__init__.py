"""
Encore Backend

Setlist manager: curate ordered collections of songs from a shared catalog.

Package Structure:
==================
    encore/
    ├── api/        ← FastAPI application
    ├── client/     ← Drag-and-drop reorder controller (API consumer)
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn encore.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
