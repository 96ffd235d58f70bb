"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Route handlers depend on PredictorRepository, never on the motor client
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests substitute an in-memory fake
      without inheriting anything
    - Only create/list_all: the HTTP surface needs nothing else
"""

from typing import Protocol


class PredictorRepository(Protocol):
    """Contract for predictor persistence — implemented by shell."""
    async def create(self, record: dict) -> dict: ...
    async def list_all(self) -> list[dict]: ...
