"""
FastAPI dependencies for the Trainer application.

Provides dependency injection for all services. The AI provider is the
only process-wide handle: it is created once at startup and handed to the
services that call the text-generation service.
"""

from typing import Optional

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from trainer.config import Settings

# Check-in services
from trainer.services.checkin.field_specs import FieldSpecRegistry
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator

# Intake services
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent

# Plan services
from trainer.services.plan.safety_gate import SafetyGate
from trainer.services.plan.plan_validator import PlanContractValidator
from trainer.services.plan.plan_generator import PlanGenerator


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# AI
_ai_provider: Optional[AIProvider] = None

# Check-in
_field_registry: Optional[FieldSpecRegistry] = None
_extraction_validator: Optional[ExtractionValidator] = None
_accumulator: Optional[CheckInAccumulator] = None

# Intake
_follow_up_policy: Optional[FollowUpPolicy] = None
_intake_agent: Optional[IntakeAgent] = None

# Plan
_safety_gate: Optional[SafetyGate] = None
_plan_generator: Optional[PlanGenerator] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def create_ai_provider(settings: Settings) -> AIProvider:
    """Build the configured AI provider."""
    if settings.AI_PROVIDER == "claude":
        return ClaudeProvider(
            api_key=settings.CLAUDE_API_KEY,
            model=settings.CLAUDE_MODEL,
            max_retries=settings.AI_MAX_RETRIES,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    return OpenAIProvider(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        max_retries=settings.AI_MAX_RETRIES,
        timeout=settings.AI_TIMEOUT_SECONDS,
        organization=settings.OPENAI_ORGANIZATION,
    )


def init_checkin_services(settings: Settings) -> None:
    """Initialize check-in services."""
    global _field_registry, _extraction_validator, _accumulator

    _field_registry = FieldSpecRegistry.default(sleep_quality_max=settings.SLEEP_QUALITY_MAX)
    _extraction_validator = ExtractionValidator(registry=_field_registry)
    _accumulator = CheckInAccumulator(registry=_field_registry)


def init_intake_services(settings: Settings, ai_provider: AIProvider) -> None:
    """Initialize intake services."""
    global _follow_up_policy, _intake_agent

    _follow_up_policy = FollowUpPolicy(registry=_field_registry)
    _intake_agent = IntakeAgent(
        ai_provider=ai_provider,
        registry=_field_registry,
        history_limit=settings.INTAKE_HISTORY_LIMIT,
        temperature=settings.INTAKE_TEMPERATURE,
        max_tokens=settings.INTAKE_MAX_TOKENS,
    )


def init_plan_services(settings: Settings, ai_provider: AIProvider) -> None:
    """Initialize plan services."""
    global _safety_gate, _plan_generator

    _safety_gate = SafetyGate(accumulator=_accumulator)
    _plan_generator = PlanGenerator(
        ai_provider=ai_provider,
        validator=PlanContractValidator(),
        temperature=settings.PLAN_TEMPERATURE,
        max_tokens=settings.PLAN_MAX_TOKENS,
    )


def init_all_services(settings: Settings, ai_provider: Optional[AIProvider] = None) -> None:
    """
    Initialize all services at application startup.

    Args:
        settings: Application settings
        ai_provider: Pre-built provider (tests); built from settings when omitted
    """
    global _ai_provider

    _ai_provider = ai_provider or create_ai_provider(settings)

    init_checkin_services(settings)
    init_intake_services(settings, _ai_provider)
    init_plan_services(settings, _ai_provider)


# ─────────────────────────────────────────────────────────────────
# AI getters
# ─────────────────────────────────────────────────────────────────

def get_ai_provider() -> AIProvider:
    """Get the shared AI provider."""
    if _ai_provider is None:
        raise RuntimeError("AI provider not initialized. Call init_all_services first.")
    return _ai_provider


# ─────────────────────────────────────────────────────────────────
# Check-in getters
# ─────────────────────────────────────────────────────────────────

def get_extraction_validator() -> ExtractionValidator:
    """Get extraction validator instance."""
    if _extraction_validator is None:
        raise RuntimeError("Check-in services not initialized.")
    return _extraction_validator


def get_accumulator() -> CheckInAccumulator:
    """Get check-in accumulator instance."""
    if _accumulator is None:
        raise RuntimeError("Check-in services not initialized.")
    return _accumulator


# ─────────────────────────────────────────────────────────────────
# Intake getters
# ─────────────────────────────────────────────────────────────────

def get_follow_up_policy() -> FollowUpPolicy:
    """Get follow-up policy instance."""
    if _follow_up_policy is None:
        raise RuntimeError("Intake services not initialized.")
    return _follow_up_policy


def get_intake_agent() -> IntakeAgent:
    """Get intake agent instance."""
    if _intake_agent is None:
        raise RuntimeError("Intake services not initialized.")
    return _intake_agent


# ─────────────────────────────────────────────────────────────────
# Plan getters
# ─────────────────────────────────────────────────────────────────

def get_safety_gate() -> SafetyGate:
    """Get safety gate instance."""
    if _safety_gate is None:
        raise RuntimeError("Plan services not initialized.")
    return _safety_gate


def get_plan_generator() -> PlanGenerator:
    """Get plan generator instance."""
    if _plan_generator is None:
        raise RuntimeError("Plan services not initialized.")
    return _plan_generator
