"""
Trainer Services.

All service classes organized by feature.
"""

# Check-in services
from trainer.services.checkin.field_specs import FieldSpec, FieldSpecRegistry
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator

# Intake services
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent

# Plan services
from trainer.services.plan.safety_gate import SafetyGate
from trainer.services.plan.plan_validator import PlanContractValidator, PlanContractError
from trainer.services.plan.plan_generator import PlanGenerator

__all__ = [
    "FieldSpec",
    "FieldSpecRegistry",
    "ExtractionValidator",
    "CheckInAccumulator",
    "FollowUpPolicy",
    "IntakeAgent",
    "SafetyGate",
    "PlanContractValidator",
    "PlanContractError",
    "PlanGenerator",
]
