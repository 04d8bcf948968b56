"""SQL Repositories — Credential Store and Post Store over an AsyncSession.

Invariants:
    - Every method returns Ok/Err; SQLAlchemyError never escapes
    - A failed write rolls the session back before returning Err
    - Posts are always returned with their author loaded
    - update stamps updated_at itself, even when the sent values match the
      stored ones and no column would otherwise change
    - Unique-email violations surface as Err(DUPLICATE), even when two
      registrations race past the service's existence check

Design Decisions:
    - Re-select after insert/update with populate_existing: the returned post
      reflects committed column values and a freshly loaded author
    - One repository instance per request, bound to that request's session
"""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog_api.core.domain_types import AccountId, ActingIdentity
from blog_api.core.result import Err, FailureKind, Ok, Result
from blog_api.models.account import Account
from blog_api.models.post import Post

UPDATABLE_POST_FIELDS = ("title", "content")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlAccountRepository:
    """Credential Store backed by the accounts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Result[Account | None]:
        try:
            result = await self.db.execute(
                select(Account).where(Account.email == email),
            )
            return Ok(result.scalar_one_or_none())
        except SQLAlchemyError as e:
            return Err(FailureKind.STORE_FAILURE, str(e))

    async def find_identity(
        self, account_id: str,
    ) -> Result[ActingIdentity | None]:
        """Look up id+email only — the hash column is never selected."""
        try:
            result = await self.db.execute(
                select(Account.id, Account.email).where(
                    Account.id == account_id,
                ),
            )
            row = result.one_or_none()
        except SQLAlchemyError as e:
            return Err(FailureKind.STORE_FAILURE, str(e))
        if row is None:
            return Ok(None)
        return Ok(ActingIdentity(id=AccountId(row.id), email=row.email))

    async def create(self, email: str, password_hash: str) -> Result[Account]:
        account = Account(email=email, password_hash=password_hash)
        self.db.add(account)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            return Err(FailureKind.DUPLICATE, str(e))
        except SQLAlchemyError as e:
            await self.db.rollback()
            return Err(FailureKind.STORE_FAILURE, str(e))
        return Ok(account)


class SqlPostRepository:
    """Post Store backed by the posts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load(self, post_id: str) -> Post | None:
        result = await self.db.execute(
            select(Post)
            .options(selectinload(Post.author))
            .where(Post.id == post_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def list_newest_first(self) -> Result[list[Post]]:
        try:
            result = await self.db.execute(
                select(Post)
                .options(selectinload(Post.author))
                .order_by(Post.created_at.desc()),
            )
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return Err(FailureKind.STORE_FAILURE, str(e))

    async def get(self, post_id: str) -> Result[Post | None]:
        try:
            return Ok(await self._load(post_id))
        except SQLAlchemyError as e:
            return Err(FailureKind.STORE_FAILURE, str(e))

    async def create(
        self, title: str, content: str, author_id: str,
    ) -> Result[Post]:
        post = Post(title=title, content=content, author_id=author_id)
        self.db.add(post)
        try:
            await self.db.commit()
            created = await self._load(post.id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            return Err(FailureKind.STORE_FAILURE, str(e))
        if created is None:
            return Err(FailureKind.STORE_FAILURE, f"post {post.id} vanished after insert")
        return Ok(created)

    async def update(self, post: Post, changes: dict[str, str]) -> Result[Post]:
        for field in UPDATABLE_POST_FIELDS:
            if field in changes:
                setattr(post, field, changes[field])
        post.updated_at = _utcnow()
        try:
            await self.db.commit()
            updated = await self._load(post.id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            return Err(FailureKind.STORE_FAILURE, str(e))
        if updated is None:
            return Err(FailureKind.STORE_FAILURE, f"post {post.id} vanished during update")
        return Ok(updated)

    async def delete(self, post: Post) -> Result[None]:
        try:
            await self.db.delete(post)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            return Err(FailureKind.STORE_FAILURE, str(e))
        return Ok(None)
