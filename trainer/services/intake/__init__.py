"""
Intake services.

Follow-up policy and model-facing intake agent.
"""

from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent

__all__ = [
    "FollowUpPolicy",
    "IntakeAgent",
]
