"""Shared base for domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER primary keys
IdType = BigInteger().with_variant(Integer(), "sqlite")

# Timestamps are stored and compared as timezone-aware UTC
TimestampType = DateTime(timezone=True)


def utc_now() -> datetime:
    """Current time as timezone-aware UTC"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""

    pass
