"""
SQLAlchemy declarative base shared by items, bids, counters and users.
Alembic reads Base.metadata to autogenerate migrations.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""
