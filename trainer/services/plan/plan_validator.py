"""
Output-contract validation for model-generated workout plans.

A generated plan is only trusted once it matches the contract exactly:
known top-level keys only, closed enums, integer durations in [0, 180], at
least one activity. Violations are reported field by field; a malformed
plan is never repaired.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from trainer.schemas.plan import GeneratedPlan

logger = logging.getLogger(__name__)


class PlanContractError(Exception):
    """A generated plan violated the output contract."""

    def __init__(self, violations: List[Dict[str, str]], message: str = "Model output invalid"):
        super().__init__(message)
        self.message = message
        self.violations = violations

    @property
    def fields(self) -> List[str]:
        return [v["field"] for v in self.violations]


def _format_location(loc: tuple) -> str:
    if not loc:
        return "plan"
    parts: List[str] = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}" if parts else str(item))
    return "".join(parts)


class PlanContractValidator:
    """
    Validates untrusted plan candidates against the GeneratedPlan contract.
    """

    def validate(self, candidate: Any) -> GeneratedPlan:
        """
        Check a candidate plan.

        Args:
            candidate: Parsed model output

        Returns:
            The validated GeneratedPlan

        Raises:
            PlanContractError: With one violation per offending field
        """
        try:
            return GeneratedPlan.model_validate(candidate, strict=True)
        except ValidationError as e:
            violations = [
                {"field": _format_location(err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            logger.warning(f"Generated plan failed contract validation: {violations}")
            raise PlanContractError(violations) from e
