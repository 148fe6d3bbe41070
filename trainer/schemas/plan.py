"""
Pydantic models for workout plan generation.

GeneratedPlan doubles as the output contract for model-generated plans:
unknown top-level keys are rejected and values are validated strictly.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from trainer.schemas.intake import AthleteContext, PartialCheckIn


Modality = Literal["dance", "strength", "zone2", "recovery", "rest"]
Intensity = Literal["easy", "moderate", "hard"]

MAX_DURATION_MIN = 180


# =============================================================================
# Plan Schemas
# =============================================================================

class Activity(BaseModel):
    """One block of a workout plan."""
    type: str
    description: str
    durationMin: int = Field(..., ge=0, le=MAX_DURATION_MIN)
    intensity: Intensity


class GeneratedPlan(BaseModel):
    """Workout plan returned to the caller."""
    model_config = ConfigDict(extra="forbid")

    modality: Modality
    durationMin: int = Field(..., ge=0, le=MAX_DURATION_MIN)
    intensity: Intensity
    rationale: str
    stopIf: List[str]
    activities: List[Activity] = Field(..., min_length=1)


# =============================================================================
# Request Schemas
# =============================================================================

class PlanRequest(BaseModel):
    """POST /api/plan"""
    checkIn: PartialCheckIn
    context: Optional[AthleteContext] = None


# =============================================================================
# Response Schemas
# =============================================================================

class PlanResponse(BaseModel):
    """Response for POST /api/plan"""
    plan: GeneratedPlan
    source: Literal["safety_gate", "generated"]
    triggers: List[str] = Field(default_factory=list)
