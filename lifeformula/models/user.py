"""User ORM - anonymous visitor keyed by an opaque external reference.

Invariants:
    - session_id is unique and is the user_ref the API receives
    - Rows are created on first use by the usage collaborators
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifeformula.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True,
    )
    preferences: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    usages: Mapped[list["ToolUsage"]] = relationship(
        "ToolUsage", back_populates="user", cascade="all, delete-orphan",
    )
    subscription: Mapped[Optional["UserSubscription"]] = relationship(
        "UserSubscription", back_populates="user",
        cascade="all, delete-orphan", uselist=False,
    )
