"""Infrastructure Layer — database, crypto primitives, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - Every collaborator call returns an explicit Result (core/result.py)
"""
