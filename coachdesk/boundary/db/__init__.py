"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management

Models live in coachdesk.boundary.db.models and CRUD singletons in
coachdesk.boundary.db.CRUD.

Dependencies: sqlalchemy, coachdesk.configs
System role: Database adapter for per-user coaching data
"""

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin
from coachdesk.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from coachdesk.boundary.db import models  # noqa: F401  registers tables on Base.metadata

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
