"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PredictorId is the hex string of the store-generated document id
    - PredictorId is never supplied by a client

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str over ObjectId: the id crosses the HTTP boundary as JSON text
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PredictorId = NewType("PredictorId", str)
