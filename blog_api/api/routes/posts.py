"""Post Routes — public reads, author-only writes.

Invariants:
    - GET routes take no identity
    - POST/PUT/DELETE resolve require_identity first; the guard's 401/403
      short-circuits before the service is called
    - The resolved identity is handed to the service as an argument
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from blog_api.api.dependencies import get_post_service, require_identity
from blog_api.core.domain_types import ActingIdentity
from blog_api.schemas.envelope import success
from blog_api.schemas.post import PostResponse
from blog_api.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


def _serialize(post) -> dict:
    return PostResponse.model_validate(post).model_dump(
        mode="json", by_alias=True,
    )


@router.get("")
async def list_posts(service: PostService = Depends(get_post_service)):
    """All posts, newest first."""
    posts = await service.list_posts()
    return success(data={"posts": [_serialize(p) for p in posts]})


@router.get("/{post_id}")
async def get_post(
    post_id: str, service: PostService = Depends(get_post_service),
):
    post = await service.get_post(post_id)
    return success(data={"post": _serialize(post)})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: Any = Body(None),
    identity: ActingIdentity = Depends(require_identity),
    service: PostService = Depends(get_post_service),
):
    post = await service.create_post(identity, payload)
    return success(
        data={"post": _serialize(post)},
        message="Post created successfully",
    )


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    payload: Any = Body(None),
    identity: ActingIdentity = Depends(require_identity),
    service: PostService = Depends(get_post_service),
):
    post = await service.update_post(identity, post_id, payload)
    return success(
        data={"post": _serialize(post)},
        message="Post updated successfully",
    )


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    identity: ActingIdentity = Depends(require_identity),
    service: PostService = Depends(get_post_service),
):
    await service.delete_post(identity, post_id)
    return success(message="Post deleted successfully")
