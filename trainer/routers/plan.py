"""
FastAPI router for workout plan endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from trainer.dependencies import (
    get_accumulator,
    get_safety_gate,
    get_plan_generator,
)
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.plan.safety_gate import SafetyGate
from trainer.services.plan.plan_generator import PlanGenerator
from trainer.schemas.plan import PlanRequest, PlanResponse
from trainer.pipelines import plan as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plan", tags=["plan"])


@router.post("", response_model=PlanResponse)
async def create_plan(
    body: PlanRequest,
    accumulator: Annotated[CheckInAccumulator, Depends(get_accumulator)],
    safety_gate: Annotated[SafetyGate, Depends(get_safety_gate)],
    plan_generator: Annotated[PlanGenerator, Depends(get_plan_generator)],
):
    """
    Create today's workout plan from a complete check-in.

    High soreness or very low energy returns the fixed recovery plan
    without calling the model.
    """
    result = await pipelines.create_plan_pipeline(
        accumulator=accumulator,
        safety_gate=safety_gate,
        plan_generator=plan_generator,
        check_in=body.checkIn.to_record(),
        context=body.context.model_dump(exclude_none=True) if body.context else None,
    )

    return PlanResponse(**result)
