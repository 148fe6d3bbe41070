"""
Plan services.

Safety gate, plan generation and output-contract validation.
"""

from trainer.services.plan.safety_gate import SafetyGate, ForcedPlan, DelegatePlan, PlanPath
from trainer.services.plan.plan_validator import PlanContractValidator, PlanContractError
from trainer.services.plan.plan_generator import PlanGenerator

__all__ = [
    "SafetyGate",
    "ForcedPlan",
    "DelegatePlan",
    "PlanPath",
    "PlanContractValidator",
    "PlanContractError",
    "PlanGenerator",
]
