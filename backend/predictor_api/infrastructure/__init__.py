"""Infrastructure Layer — document store client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All driver failures mapped to core/errors.py types
"""
