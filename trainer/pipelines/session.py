"""
In-memory intake session.

Owns one conversation's partial check-in and chat history. State only
advances when a turn succeeds; the record is discarded on reset or once a
plan has been produced. Sessions share nothing, so no locking is needed.
"""

import logging
from typing import Any, Dict, List, Optional

from trainer.pipelines.intake import intake_turn_pipeline
from trainer.pipelines.plan import create_plan_pipeline
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent
from trainer.services.plan.safety_gate import SafetyGate
from trainer.services.plan.plan_generator import PlanGenerator

logger = logging.getLogger(__name__)


class IntakeSession:
    """
    Conversation-scoped owner of a check-in record.
    """

    def __init__(
        self,
        intake_agent: IntakeAgent,
        plan_generator: PlanGenerator,
        extraction_validator: Optional[ExtractionValidator] = None,
        accumulator: Optional[CheckInAccumulator] = None,
        follow_up_policy: Optional[FollowUpPolicy] = None,
        safety_gate: Optional[SafetyGate] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self._intake_agent = intake_agent
        self._plan_generator = plan_generator
        self._accumulator = accumulator or CheckInAccumulator()
        registry = self._accumulator.registry
        self._extraction_validator = extraction_validator or ExtractionValidator(registry)
        self._follow_up_policy = follow_up_policy or FollowUpPolicy(registry)
        self._safety_gate = safety_gate or SafetyGate(self._accumulator)
        self._context = dict(context or {})

        self._check_in: Dict[str, Any] = {}
        self._history: List[Dict[str, str]] = []

    @property
    def check_in(self) -> Dict[str, Any]:
        return dict(self._check_in)

    @property
    def history(self) -> List[Dict[str, str]]:
        return list(self._history)

    @property
    def missing(self) -> List[str]:
        return self._accumulator.missing_required(self._check_in)

    @property
    def is_complete(self) -> bool:
        return self._accumulator.is_complete(self._check_in)

    async def process_turn(self, message: str) -> Dict[str, Any]:
        """
        Run one intake turn against the owned state.

        Returns:
            The turn result (coachReply, checkIn, missing, done)
        """
        result = await intake_turn_pipeline(
            intake_agent=self._intake_agent,
            extraction_validator=self._extraction_validator,
            accumulator=self._accumulator,
            follow_up_policy=self._follow_up_policy,
            message=message,
            check_in=self._check_in,
            history=self._history,
            context=self._context,
        )

        self._check_in = dict(result["checkIn"])
        self._history.append({"role": "user", "content": message})
        self._history.append({"role": "trainer", "content": result["coachReply"]})

        return result

    async def request_plan(self) -> Dict[str, Any]:
        """
        Produce a plan for the owned check-in, then discard the record.

        Raises:
            ValidationException: If the check-in is not complete yet
        """
        result = await create_plan_pipeline(
            accumulator=self._accumulator,
            safety_gate=self._safety_gate,
            plan_generator=self._plan_generator,
            check_in=self._check_in,
            context=self._context,
        )

        logger.info(f"Plan produced from {result['source']}; closing intake session")
        self.reset()

        return result

    def reset(self) -> None:
        """Start over with an empty check-in."""
        self._check_in = {}
        self._history = []
