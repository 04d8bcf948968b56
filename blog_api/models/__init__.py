"""ORM Models — SQLAlchemy declarative models for accounts and posts.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every Post belongs to exactly one Account (non-null author_id)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blog_api.models.account import Account  # noqa: F401
from blog_api.models.post import Post  # noqa: F401
