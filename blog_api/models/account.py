"""Account ORM — credential store rows for registered users.

Invariants:
    - id is an opaque UUID string (client-side default)
    - email is unique and stored case-sensitively as submitted
    - password_hash is a bcrypt hash; never serialized to clients

Design Decisions:
    - String id over native UUID: ids are opaque to clients and path params
      stay plain strings (a malformed id is just a 404, not a 400)
    - No posts relationship: nothing here navigates account → posts
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    """Registered account — owns posts."""
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )
