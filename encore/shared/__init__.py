"""
Shared Module

Contains code shared between the API and the client:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── migrations/     ← Alembic environment and revisions

Usage:
======
    from encore.shared.models import Collection, Item, Membership
    from encore.shared.repositories import MembershipRepository
    from encore.shared.services import MembershipService
    from encore.shared.schemas import ReorderRequest, MemberResponse
    from encore.shared.core import logger, EncoreException
"""
