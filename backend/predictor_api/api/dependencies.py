"""Request Dependencies — hand the process-wide store to route handlers.

Invariants:
    - Handlers receive the store through Depends, never by import
    - The store is read from app.state, set once by the lifespan

Design Decisions:
    - Dependency function over closure capture: tests swap the store with
      app.dependency_overrides
"""

from fastapi import Request

from predictor_api.core.repository_protocols import PredictorRepository


def get_predictor_repository(request: Request) -> PredictorRepository:
    """FastAPI dependency for the predictor repository."""
    store = getattr(request.app.state, "predictor_store", None)
    if store is None:
        raise RuntimeError("Predictor store not initialized")
    return store
