"""Post Service — CRUD orchestration over the Post Store with ownership enforcement.

Invariants:
    - list/get are public; create/update/delete need an ActingIdentity
    - Update validates the body BEFORE any store access
    - Ownership is checked against the stored author_id before any write;
      a non-owner never causes a mutation
    - A missing identity is a programming error → InternalError (500), not 401
    - Every unexpected failure collapses to InternalError (services/base.py)

Design Decisions:
    - Identity arrives as an explicit argument from the guard dependency,
      never read off a shared request object
    - No version stamp: concurrent writers on one post resolve last-write-wins
"""

import logging

from blog_api.core.domain_types import ActingIdentity, PostAction
from blog_api.core.enforce_ownership import check_post_ownership
from blog_api.core.errors import ResourceNotFoundError
from blog_api.core.repository_protocols import PostLike, PostRepository
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.schemas.validation import validate_body
from blog_api.services.base import internal_error_boundary, unwrap

logger = logging.getLogger(__name__)


def _require_identity(identity: ActingIdentity | None) -> ActingIdentity:
    if identity is None:
        raise RuntimeError("Acting identity missing on an authenticated route")
    return identity


class PostService:
    """Posts visible to everyone, writable by their author only."""

    def __init__(self, posts: PostRepository):
        self.posts = posts

    async def _get_or_404(self, post_id: str, operation: str) -> PostLike:
        post = unwrap(await self.posts.get(post_id), operation)
        if post is None:
            raise ResourceNotFoundError("Post")
        return post

    async def list_posts(self) -> list[PostLike]:
        with internal_error_boundary("list posts"):
            return unwrap(await self.posts.list_newest_first(), "list posts")

    async def get_post(self, post_id: str) -> PostLike:
        with internal_error_boundary("get post", post_id=post_id):
            return await self._get_or_404(post_id, "get post")

    async def create_post(
        self, identity: ActingIdentity | None, payload: object,
    ) -> PostLike:
        with internal_error_boundary("create post"):
            body = unwrap(validate_body(PostCreate, payload), "create post")
            author = _require_identity(identity)
            post = unwrap(
                await self.posts.create(body.title, body.content, author.id),
                "create post",
            )
            logger.info(
                "Post created",
                extra={"post_id": post.id, "account_id": author.id},
            )
            return post

    async def update_post(
        self, identity: ActingIdentity | None, post_id: str, payload: object,
    ) -> PostLike:
        with internal_error_boundary("update post", post_id=post_id):
            body = unwrap(validate_body(PostUpdate, payload), "update post")
            actor = _require_identity(identity)
            existing = await self._get_or_404(post_id, "update post")

            denied = check_post_ownership(
                existing.author_id, actor, PostAction.UPDATE,
            )
            if denied:
                raise denied

            return unwrap(
                await self.posts.update(existing, body.changes()),
                "update post",
            )

    async def delete_post(
        self, identity: ActingIdentity | None, post_id: str,
    ) -> None:
        with internal_error_boundary("delete post", post_id=post_id):
            actor = _require_identity(identity)
            existing = await self._get_or_404(post_id, "delete post")

            denied = check_post_ownership(
                existing.author_id, actor, PostAction.DELETE,
            )
            if denied:
                raise denied

            unwrap(await self.posts.delete(existing), "delete post")
            logger.info(
                "Post deleted",
                extra={"post_id": post_id, "account_id": actor.id},
            )
