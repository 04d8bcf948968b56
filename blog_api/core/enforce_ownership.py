"""Ownership Enforcement — only a post's author may update or delete it.

Invariants:
    - check_post_ownership is PURE: returns the error to raise, or None
    - Comparison is on account id only; email never participates
"""

from blog_api.core.domain_types import ActingIdentity, PostAction
from blog_api.core.errors import NotOwnerError


def check_post_ownership(
    author_id: str, identity: ActingIdentity, action: PostAction,
) -> NotOwnerError | None:
    """Return NotOwnerError when identity did not author the post."""
    if author_id != identity.id:
        return NotOwnerError(action.value)
    return None
