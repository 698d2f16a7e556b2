from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


VALID_STATUSES = frozenset(s.value for s in TaskStatus)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class UTCTimestamp(TypeDecorator):
    """Timestamp column that stores and returns timezone-aware UTC.

    Naive input is taken as UTC. SQLite keeps no offset, so results are
    re-tagged on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Task(SQLModel, table=True):
    # column order is part of the table contract
    __tablename__ = "tasks"

    # BIGINT on PostgreSQL; SQLite only autoincrements a plain INTEGER key
    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_type=BigInteger().with_variant(Integer(), "sqlite"),
    )
    title: str = Field(nullable=False)
    description: str = Field(default="", nullable=False)
    status: str = Field(nullable=False)
    created_at: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp(), nullable=False)
    updated_at: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp(), nullable=False)
