"""
Pydantic models for the check-in intake conversation.

Field bounds are not declared here: they come from the configurable field
spec registry and are enforced by the intake pipeline.
"""

from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


# =============================================================================
# Shared Schemas
# =============================================================================

class PartialCheckIn(BaseModel):
    """Daily check-in as known so far. Omitted fields are unknown."""
    model_config = ConfigDict(extra="forbid")

    sleepHours: Optional[Union[StrictInt, StrictFloat]] = None
    sleepQuality: Optional[Union[StrictInt, StrictFloat]] = None
    energy: Optional[Union[StrictInt, StrictFloat]] = None
    soreness: Optional[Union[StrictInt, StrictFloat]] = None
    stress: Optional[Union[StrictInt, StrictFloat]] = None
    sorenessAreas: Optional[List[StrictStr]] = None
    notes: Optional[StrictStr] = None

    def to_record(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent, explicit nulls included."""
        return self.model_dump(exclude_unset=True)


class ChatTurn(BaseModel):
    """One message of the intake conversation."""
    role: Literal["trainer", "user"]
    content: str


class AthleteContext(BaseModel):
    """Opaque athlete context, passed through to the model only."""
    longTermGoals: Optional[Union[str, List[str]]] = None
    trainingHistory: Optional[Any] = None
    previousWorkout: Optional[Union[str, Dict[str, Any]]] = None
    equipment: Optional[Any] = None
    limitations: Optional[Any] = None
    preferences: Optional[Any] = None
    availableTimeMin: Optional[float] = None


class FieldError(BaseModel):
    """A single field-level violation."""
    field: str
    message: str


# =============================================================================
# Request Schemas
# =============================================================================

class IntakeRequest(BaseModel):
    """POST /api/intake"""
    message: str = Field(..., min_length=1, max_length=5000)
    checkIn: Optional[PartialCheckIn] = None
    history: List[ChatTurn] = Field(default_factory=list)
    context: Optional[AthleteContext] = None


# =============================================================================
# Response Schemas
# =============================================================================

class IntakeResponse(BaseModel):
    """Response for POST /api/intake"""
    coachReply: str
    checkIn: Dict[str, Any]
    missing: List[str]
    done: bool
    validationErrors: Optional[List[FieldError]] = None


class IntakeModelOutput(BaseModel):
    """
    Structured reply expected from the model each intake turn.

    ``extracted`` is deliberately untyped; fields are validated one by one.
    """
    coachReply: StrictStr
    extracted: Optional[Dict[str, Any]] = None
