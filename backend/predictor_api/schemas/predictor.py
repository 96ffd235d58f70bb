"""Predictor Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PredictorCreate.name: string only (no coercion), not empty or whitespace-only
    - PredictorCreate.name is stored exactly as sent (no trimming, no length cap)
    - PredictorCreate never carries an id (unknown keys ignored)
    - PredictorResponse.id is the store-generated id as text

Design Decisions:
    - StrictStr over str: a numeric or boolean name is a client bug, not a label
"""

from pydantic import BaseModel, Field, StrictStr, field_validator


class PredictorCreate(BaseModel):
    """Predictor creation — validates name type and content."""
    name: StrictStr = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v


class PredictorResponse(BaseModel):
    """Predictor response — public-facing record data."""
    id: str | None = None
    name: str
