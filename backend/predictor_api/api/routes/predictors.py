"""Predictor Routes — create and list predictor records.

Invariants:
    - Request body is validated by Pydantic before reaching the handler:
      a bad body never causes a storage call
    - PersistenceError propagates to the global handler (500, generic message)
    - The create response carries the store-generated id

Design Decisions:
    - Repository injected via Depends(get_predictor_repository): handlers see only
      the create/list_all capability, not the motor client
"""

import logging

from fastapi import APIRouter, Depends, status

from predictor_api.api.dependencies import get_predictor_repository
from predictor_api.core.repository_protocols import PredictorRepository
from predictor_api.schemas.predictor import PredictorCreate, PredictorResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/predictors", tags=["predictors"])


@router.post(
    "", response_model=PredictorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_predictor(
    body: PredictorCreate,
    repository: PredictorRepository = Depends(get_predictor_repository),
):
    """Create a new predictor."""
    created = await repository.create(body.model_dump())
    return PredictorResponse(**created)


@router.get("", response_model=list[PredictorResponse])
async def list_predictors(
    repository: PredictorRepository = Depends(get_predictor_repository),
):
    """List every stored predictor, unfiltered."""
    records = await repository.list_all()
    return [PredictorResponse(**r) for r in records]
