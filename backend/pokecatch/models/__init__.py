"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - OwnershipRecord is scoped by user_id; CatalogEntry is shared

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from pokecatch.models.user import User  # noqa: F401
from pokecatch.models.catalog_entry import CatalogEntry  # noqa: F401
from pokecatch.models.ownership_record import OwnershipRecord  # noqa: F401
