"""
FastAPI router for check-in intake endpoints.

One conversational turn per request; the caller carries the partial
check-in and recent turns between requests.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from trainer.dependencies import (
    get_intake_agent,
    get_extraction_validator,
    get_accumulator,
    get_follow_up_policy,
)
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent
from trainer.schemas.intake import IntakeRequest, IntakeResponse
from trainer.pipelines import intake as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intake", tags=["intake"])


@router.post("", response_model=IntakeResponse, response_model_exclude_none=True)
async def intake_turn(
    body: IntakeRequest,
    intake_agent: Annotated[IntakeAgent, Depends(get_intake_agent)],
    extraction_validator: Annotated[ExtractionValidator, Depends(get_extraction_validator)],
    accumulator: Annotated[CheckInAccumulator, Depends(get_accumulator)],
    follow_up_policy: Annotated[FollowUpPolicy, Depends(get_follow_up_policy)],
):
    """
    Process one intake message.

    Extracts check-in fields from the message, merges them into the
    supplied check-in and returns the coach reply with what is still missing.
    """
    result = await pipelines.intake_turn_pipeline(
        intake_agent=intake_agent,
        extraction_validator=extraction_validator,
        accumulator=accumulator,
        follow_up_policy=follow_up_policy,
        message=body.message,
        check_in=body.checkIn.to_record() if body.checkIn else {},
        history=[turn.model_dump() for turn in body.history],
        context=body.context.model_dump(exclude_none=True) if body.context else {},
    )

    return IntakeResponse(**result)
