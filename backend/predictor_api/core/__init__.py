"""Core Layer — domain types, error hierarchy, repository contracts. No IO.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
"""
