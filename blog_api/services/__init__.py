"""Service Layer — Access Guard, Auth Service, Post Service.

Invariants:
    - Services receive collaborators through their constructors
    - Every collaborator Err is mapped once, here, to the core/errors.py taxonomy
"""
