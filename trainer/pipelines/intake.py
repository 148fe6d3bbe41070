"""
Check-in intake pipeline.

Stateless orchestration of one intake turn: model call, extraction
validation, merge, follow-up decision.
"""

import logging
from typing import Optional, Dict, Any, List

from common.ai import AIProviderError
from common.utils.exceptions import ValidationException, InternalServerException
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent

logger = logging.getLogger(__name__)


async def intake_turn_pipeline(
    intake_agent: IntakeAgent,
    extraction_validator: ExtractionValidator,
    accumulator: CheckInAccumulator,
    follow_up_policy: FollowUpPolicy,
    message: str,
    check_in: Optional[Dict[str, Any]] = None,
    history: Optional[List[Dict[str, str]]] = None,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Orchestrates one intake turn.

    Args:
        intake_agent: For the text-generation call
        extraction_validator: For sanitizing extracted fields
        accumulator: For merge and completion
        follow_up_policy: For the final reply
        message: Latest athlete message
        check_in: Check-in known before this turn
        history: Prior turns as {"role", "content"} dicts
        context: Opaque athlete context

    Returns:
        dict with coachReply, checkIn, missing, done and, when a merge
        was rejected, validationErrors

    Raises:
        ValidationException: If the supplied check-in is invalid
        InternalServerException: If the text-generation service fails
    """
    prior, errors = accumulator.registry.normalize_record(check_in or {})
    if errors:
        raise ValidationException(
            "Invalid check-in",
            code="INVALID_CHECKIN",
            errors=errors,
        )

    try:
        output = await intake_agent.run_turn(
            message=message,
            check_in=prior,
            history=history or [],
            context=context or {},
        )
    except AIProviderError as e:
        logger.error(f"Intake generation failed: {e}")
        raise InternalServerException(
            "Text generation service unavailable",
            code="AI_SERVICE_ERROR",
        ) from e

    if output is None:
        # Unusable reply: advance deterministically from the prior state
        return _fallback_result(follow_up_policy, accumulator, prior)

    extracted = extraction_validator.validate(output.extracted)
    merge = accumulator.merge(prior, extracted)

    if not merge.accepted:
        return _fallback_result(follow_up_policy, accumulator, prior, merge.errors)

    missing = accumulator.missing_required(merge.record)
    return _turn_result(
        coach_reply=follow_up_policy.finalize_reply(output.coachReply, missing),
        check_in=merge.record,
        missing=missing,
    )


def _fallback_result(
    follow_up_policy: FollowUpPolicy,
    accumulator: CheckInAccumulator,
    prior: Dict[str, Any],
    validation_errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    missing = accumulator.missing_required(prior)
    return _turn_result(
        coach_reply=follow_up_policy.build_follow_up_prompt(missing),
        check_in=prior,
        missing=missing,
        validation_errors=validation_errors,
    )


def _turn_result(
    coach_reply: str,
    check_in: Dict[str, Any],
    missing: List[str],
    validation_errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """Format a turn for the API response."""
    result: Dict[str, Any] = {
        "coachReply": coach_reply,
        "checkIn": dict(check_in),
        "missing": list(missing),
        "done": not missing,
    }
    if validation_errors:
        result["validationErrors"] = validation_errors
    return result
