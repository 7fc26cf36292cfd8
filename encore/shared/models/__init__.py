"""
Encore SQLAlchemy Models

This package contains all database models for the Encore application.

Model Hierarchy:
================
    Collection
       └── memberships (Membership[], ordered by position)
              └── item (Item)

    Item
       └── memberships (Membership[])

Models Overview:
================
- Base: Declarative base and timestamp mixin
- Item: Catalog entry (song)
- Collection: Named ordered group of items (setlist)
- Membership: Junction table carrying the position of an item in a collection

Usage:
======
    from encore.shared.models import Collection, Item, Membership
"""

from encore.shared.models.base import Base, TimestampMixin
from encore.shared.models.enums import TextAlign, FontSize
from encore.shared.models.item import Item
from encore.shared.models.collection import Collection
from encore.shared.models.membership import Membership

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "TextAlign",
    "FontSize",
    # Models
    "Item",
    "Collection",
    "Membership",
]
