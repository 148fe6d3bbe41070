"""
Workout plan pipeline.

Stateless orchestration of plan selection: validate the check-in, run the
safety gate, and only then (if delegated) ask the model for a plan.
"""

import logging
from typing import Optional, Dict, Any

from common.ai import AIProviderError
from common.utils.exceptions import ValidationException, InternalServerException
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.plan.safety_gate import SafetyGate, ForcedPlan
from trainer.services.plan.plan_generator import PlanGenerator
from trainer.services.plan.plan_validator import PlanContractError

logger = logging.getLogger(__name__)


async def create_plan_pipeline(
    accumulator: CheckInAccumulator,
    safety_gate: SafetyGate,
    plan_generator: PlanGenerator,
    check_in: Dict[str, Any],
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Orchestrates plan creation for a complete check-in.

    Args:
        accumulator: For check-in validation and completion
        safety_gate: For the deterministic pre-check
        plan_generator: For model-generated plans
        check_in: Complete check-in
        context: Opaque athlete context

    Returns:
        dict with plan (GeneratedPlan), source and triggers

    Raises:
        ValidationException: If the check-in is invalid or incomplete
        InternalServerException: If the generated plan breaks its contract
            or the text-generation service fails
    """
    record, errors = accumulator.registry.normalize_record(check_in)
    missing = accumulator.missing_required(record)
    errors += [{"field": name, "message": "required"} for name in missing if name not in check_in]
    if errors:
        raise ValidationException(
            "Check-in is invalid or incomplete",
            code="INVALID_CHECKIN",
            errors=errors,
        )

    path = safety_gate.select_plan_path(record)

    if isinstance(path, ForcedPlan):
        return {
            "plan": path.plan,
            "source": "safety_gate",
            "triggers": path.triggers,
        }

    try:
        plan = await plan_generator.generate(record, path.constraints, context)
    except PlanContractError as e:
        raise InternalServerException(
            e.message,
            code="PLAN_CONTRACT_VIOLATION",
            details={"errors": e.violations},
        ) from e
    except AIProviderError as e:
        logger.error(f"Plan generation failed: {e}")
        raise InternalServerException(
            "Text generation service unavailable",
            code="AI_SERVICE_ERROR",
        ) from e

    logger.info(f"Generated {plan.modality} plan ({plan.intensity}, {plan.durationMin} min)")

    return {
        "plan": plan,
        "source": "generated",
        "triggers": [],
    }
