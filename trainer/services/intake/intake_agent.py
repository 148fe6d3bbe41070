"""
Intake agent.

Builds the per-turn prompt for the text-generation service and parses its
reply into the structured intake output. One call per turn, no retries:
an unparseable reply is reported as None and the pipeline falls back to a
deterministic follow-up.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from common.ai import AIProvider
from common.utils import parse_json_object
from trainer.schemas.intake import IntakeModelOutput
from trainer.services.checkin.field_specs import FieldSpecRegistry, DEFAULT_REGISTRY, NUMBER

logger = logging.getLogger(__name__)


INTAKE_SYSTEM_PROMPT = """You are a world-class personal trainer chatting with an athlete.
Your job in this turn:
1) Extract any check-in fields from the athlete message
2) Reply like a human coach (brief, warm, practical)
3) Ask only for the missing required fields

Required daily check-in fields:
{required_fields}

Optional fields:
- notes: string
- sorenessAreas: string[]

Rules:
- Do not invent values.
- If the athlete implies illness, acknowledge it and ask a safety-focused follow-up.
- Keep coachReply concise (1-3 sentences).
- coachReply should feel like chatting with a good friend, not like a survey.
- If the athlete gives vague language (e.g., "just okay", "kinda tired"), ask a friendly clarifying question for exact numeric values.
- Ask for at most 1-2 missing required fields per turn, and only if a required field is missing.
- If all required fields are present, coachReply must be a brief confirmation that acknowledges how the athlete is feeling and must not contain a question.
- Return valid JSON only."""


class IntakeAgent:
    """
    Talks to the text-generation service for one intake turn.
    """

    def __init__(
        self,
        ai_provider: AIProvider,
        registry: Optional[FieldSpecRegistry] = None,
        history_limit: int = 8,
        temperature: float = 0.8,
        max_tokens: int = 600,
    ):
        """
        Initialize IntakeAgent.

        Args:
            ai_provider: Shared text-generation provider
            registry: Field specs used to describe the output contract
            history_limit: Recent turns included in the prompt
            temperature: Sampling temperature for intake replies
            max_tokens: Response token cap
        """
        self._ai_provider = ai_provider
        self._registry = registry or DEFAULT_REGISTRY
        self._history_limit = history_limit
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._system_prompt = self._build_system_prompt()

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def _build_system_prompt(self) -> str:
        lines = []
        for spec in self._registry.required:
            kind = "number" if spec.kind == NUMBER else "integer"
            lines.append(
                f"- {spec.name}: {kind} {spec.min_value:g}-{spec.max_value:g}"
            )
        return INTAKE_SYSTEM_PROMPT.format(required_fields="\n".join(lines))

    def build_payload(
        self,
        message: str,
        check_in: Dict[str, Any],
        history: List[Dict[str, str]],
        context: Dict[str, Any],
    ) -> str:
        """Serialize the turn input the model sees as the user message."""
        payload = {
            "athleteContext": context,
            "currentKnownCheckIn": check_in,
            "recentConversation": history[-self._history_limit:] if self._history_limit > 0 else [],
            "latestUserMessage": message,
            "outputContract": {
                "coachReply": "string",
                "extracted": {spec.name: spec.contract_type for spec in self._registry},
            },
        }
        return json.dumps(payload, indent=2, default=str)

    async def run_turn(
        self,
        message: str,
        check_in: Dict[str, Any],
        history: List[Dict[str, str]],
        context: Dict[str, Any],
    ) -> Optional[IntakeModelOutput]:
        """
        Ask the model to extract fields and draft a reply.

        Args:
            message: Latest athlete message
            check_in: Check-in known before this turn
            history: Prior turns as {"role", "content"} dicts
            context: Opaque athlete context

        Returns:
            Parsed model output, or None when the reply is unusable

        Raises:
            AIProviderError: If the service itself fails
        """
        raw = await self._ai_provider.chat(
            message=self.build_payload(message, check_in, history, context),
            system_prompt=self._system_prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            json_mode=True,
        )

        return self.parse_reply(raw)

    def parse_reply(self, raw: Optional[str]) -> Optional[IntakeModelOutput]:
        """Parse raw model text; None on empty, non-JSON or schema mismatch."""
        data = parse_json_object(raw)
        if data is None:
            logger.warning("Intake reply was not a JSON object")
            return None

        try:
            return IntakeModelOutput.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Intake reply did not match schema: {e.error_count()} error(s)")
            return None
