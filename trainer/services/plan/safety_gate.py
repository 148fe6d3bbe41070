"""
Deterministic safety gate for plan selection.

Runs on a complete check-in before any model is asked for a plan. High
soreness or very low energy forces a fixed low-intensity recovery plan;
otherwise plan generation is allowed, with advisory constraints for the
prompt. The decision only reads validated numeric fields.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from trainer.schemas.plan import Activity, GeneratedPlan
from trainer.services.checkin.accumulator import CheckInAccumulator

logger = logging.getLogger(__name__)


@dataclass
class ForcedPlan:
    """Generation is skipped; the fixed recovery plan is returned."""
    plan: GeneratedPlan
    triggers: List[str]


@dataclass
class DelegatePlan:
    """Generation is permitted, guided by advisory constraints."""
    constraints: List[str] = field(default_factory=list)


PlanPath = Union[ForcedPlan, DelegatePlan]


class SafetyGate:
    """
    Chooses between a forced recovery plan and a generated one.
    """

    SORENESS_FORCE_THRESHOLD = 8
    ENERGY_FORCE_THRESHOLD = 2

    LOW_SLEEP_HOURS = 5
    HIGH_SORENESS = 6
    HIGH_ENERGY = 7
    LOW_SORENESS = 4

    RECOVERY_DURATION_MIN = 20

    BASE_CONSTRAINTS = [
        "Keep duration realistic (30-60 min typical).",
        "Activity durations should add up to durationMin.",
    ]

    def __init__(self, accumulator: Optional[CheckInAccumulator] = None):
        self._accumulator = accumulator or CheckInAccumulator()

    def select_plan_path(self, record: Dict[str, Any]) -> PlanPath:
        """
        Decide the plan path for a complete check-in.

        Args:
            record: Complete, validated check-in

        Returns:
            ForcedPlan or DelegatePlan

        Raises:
            ValueError: If the record is not complete
        """
        missing = self._accumulator.missing_required(record)
        if missing:
            raise ValueError(f"Safety gate needs a complete check-in; missing {missing}")

        soreness = record["soreness"]
        energy = record["energy"]

        triggers = []
        if soreness >= self.SORENESS_FORCE_THRESHOLD:
            triggers.append(f"soreness {soreness}/10")
        if energy <= self.ENERGY_FORCE_THRESHOLD:
            triggers.append(f"energy {energy}/10")

        if triggers:
            logger.info(f"Safety gate forced recovery plan ({', '.join(triggers)})")
            return ForcedPlan(plan=self.recovery_plan(triggers), triggers=triggers)

        return DelegatePlan(constraints=self.advisory_constraints(record))

    def advisory_constraints(self, record: Dict[str, Any]) -> List[str]:
        """Prompt guidance for the generator. Not enforced on its output."""
        constraints = []

        if record["sleepHours"] < self.LOW_SLEEP_HOURS:
            constraints.append('Sleep was under 5 hours: intensity must be "easy".')
        if record["soreness"] > self.HIGH_SORENESS:
            constraints.append('Soreness is above 6: avoid the "strength" modality.')
        if record["energy"] > self.HIGH_ENERGY and record["soreness"] < self.LOW_SORENESS:
            constraints.append('Energy is high and soreness low: "moderate" or "hard" intensity is allowed.')

        return constraints + self.BASE_CONSTRAINTS

    def recovery_plan(self, triggers: List[str]) -> GeneratedPlan:
        """The fixed low-intensity recovery plan."""
        return GeneratedPlan(
            modality="recovery",
            durationMin=self.RECOVERY_DURATION_MIN,
            intensity="easy",
            rationale=(
                f"High soreness or very low energy detected ({', '.join(triggers)}). "
                "Prioritizing recovery today."
            ),
            stopIf=["Pain increases", "Dizziness", "Sharp joint pain"],
            activities=[
                Activity(type="warmup", description="Gentle walk", durationMin=5, intensity="easy"),
                Activity(type="mobility", description="Light mobility flow", durationMin=7, intensity="easy"),
                Activity(type="recovery", description="Foam rolling", durationMin=5, intensity="easy"),
                Activity(type="cooldown", description="Breathing exercises", durationMin=3, intensity="easy"),
            ],
        )
