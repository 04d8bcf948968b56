"""Post ORM — blog posts owned by a single account.

Invariants:
    - author_id is non-null and never reassigned after insert
    - content defaults to the empty string, never NULL
    - updated_at refreshed on every update (stamped by SqlPostRepository.update)

Design Decisions:
    - author relationship loaded with selectin: list/get always project the
      author, and async sessions cannot lazy-load on attribute access
    - created_at indexed: the list endpoint orders by it descending
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Blog post — mutable only by its author."""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("accounts.id"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )

    author: Mapped["Account"] = relationship("Account", lazy="selectin")
