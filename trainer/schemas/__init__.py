"""
Trainer API Schemas.

Pydantic models for request/response validation.
"""

from trainer.schemas.intake import (
    PartialCheckIn,
    ChatTurn,
    AthleteContext,
    FieldError,
    IntakeRequest,
    IntakeResponse,
    IntakeModelOutput,
)
from trainer.schemas.plan import (
    Activity,
    GeneratedPlan,
    PlanRequest,
    PlanResponse,
)

__all__ = [
    "PartialCheckIn",
    "ChatTurn",
    "AthleteContext",
    "FieldError",
    "IntakeRequest",
    "IntakeResponse",
    "IntakeModelOutput",
    "Activity",
    "GeneratedPlan",
    "PlanRequest",
    "PlanResponse",
]
