"""
Workout plan generator.

Asks the text-generation service for a plan for a complete check-in that
the safety gate has delegated. The reply is untrusted: it is parsed and
passed through the output-contract validator before being returned.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from common.ai import AIProvider
from common.utils import parse_json_object
from trainer.schemas.plan import GeneratedPlan
from trainer.services.plan.plan_validator import PlanContractValidator, PlanContractError

logger = logging.getLogger(__name__)


PLAN_SYSTEM_PROMPT = """You are a conservative, safety-focused personal trainer.
Return ONLY valid JSON.
Do not include markdown.
Follow the exact schema provided."""

PLAN_OUTPUT_CONTRACT = """Return ONLY a JSON object with exactly these keys:
{
  "modality": "dance" | "strength" | "zone2" | "recovery" | "rest",
  "durationMin": number,
  "intensity": "easy" | "moderate" | "hard",
  "rationale": string,
  "stopIf": string[],
  "activities": [{"type": string, "description": string, "durationMin": number, "intensity": "easy"|"moderate"|"hard"}]
}

Rules:
- Do NOT include any other keys.
- Do NOT wrap the object in "workoutPlan".
- Use "durationMin" (not durationMinutes).
- durationMin values are whole minutes between 0 and 180."""


class PlanGenerator:
    """
    Generates a workout plan with the text-generation service.
    """

    def __init__(
        self,
        ai_provider: AIProvider,
        validator: Optional[PlanContractValidator] = None,
        temperature: float = 0.2,
        max_tokens: int = 1200,
    ):
        """
        Initialize PlanGenerator.

        Args:
            ai_provider: Shared text-generation provider
            validator: Output-contract validator
            temperature: Sampling temperature for plan generation
            max_tokens: Response token cap
        """
        self._ai_provider = ai_provider
        self._validator = validator or PlanContractValidator()
        self._temperature = temperature
        self._max_tokens = max_tokens

    def build_prompt(
        self,
        check_in: Dict[str, Any],
        constraints: List[str],
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Build the plan request sent as the user message."""
        sections = [
            "Here is today's check-in:",
            json.dumps(check_in, indent=2),
        ]

        if context:
            sections += [
                "Athlete context:",
                json.dumps(context, indent=2, default=str),
            ]

        sections.append("Create a workout plan.")

        if constraints:
            sections.append("Constraints:\n" + "\n".join(f"- {c}" for c in constraints))

        sections.append(PLAN_OUTPUT_CONTRACT)

        return "\n\n".join(sections)

    async def generate(
        self,
        check_in: Dict[str, Any],
        constraints: List[str],
        context: Optional[Dict[str, Any]] = None,
    ) -> GeneratedPlan:
        """
        Generate and validate a plan.

        Args:
            check_in: Complete, validated check-in
            constraints: Advisory constraints from the safety gate
            context: Opaque athlete context

        Returns:
            A contract-valid GeneratedPlan

        Raises:
            PlanContractError: If the reply is not a valid plan
            AIProviderError: If the service itself fails
        """
        raw = await self._ai_provider.chat(
            message=self.build_prompt(check_in, constraints, context),
            system_prompt=PLAN_SYSTEM_PROMPT,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            json_mode=True,
        )

        candidate = parse_json_object(raw)
        if candidate is None:
            logger.warning("Plan reply was not a JSON object")
            raise PlanContractError([
                {"field": "plan", "message": "response is not a JSON object"}
            ])

        return self._validator.validate(candidate)
