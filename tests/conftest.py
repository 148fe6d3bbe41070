"""Shared test fixtures for Trainer backend tests."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.ai import AIProvider
from trainer.services.checkin.field_specs import FieldSpecRegistry
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator
from trainer.services.intake.follow_up_policy import FollowUpPolicy
from trainer.services.intake.intake_agent import IntakeAgent
from trainer.services.plan.safety_gate import SafetyGate
from trainer.services.plan.plan_generator import PlanGenerator


def _model_reply(coach_reply="Thanks!", **extracted):
    """Serialize an intake reply the way the model would return it."""
    return json.dumps({"coachReply": coach_reply, "extracted": extracted})


@pytest.fixture
def model_reply():
    return _model_reply


@pytest.fixture
def registry():
    return FieldSpecRegistry.default()


@pytest.fixture
def extraction_validator(registry):
    return ExtractionValidator(registry)


@pytest.fixture
def accumulator(registry):
    return CheckInAccumulator(registry)


@pytest.fixture
def follow_up_policy(registry):
    return FollowUpPolicy(registry)


@pytest.fixture
def safety_gate(accumulator):
    return SafetyGate(accumulator)


@pytest.fixture
def mock_ai_provider():
    provider = MagicMock(spec=AIProvider)
    provider.chat = AsyncMock(return_value=_model_reply())
    return provider


@pytest.fixture
def intake_agent(mock_ai_provider, registry):
    return IntakeAgent(ai_provider=mock_ai_provider, registry=registry)


@pytest.fixture
def plan_generator(mock_ai_provider):
    return PlanGenerator(ai_provider=mock_ai_provider)


@pytest.fixture
def complete_check_in():
    return {
        "sleepHours": 8,
        "sleepQuality": 9,
        "energy": 7,
        "soreness": 2,
        "stress": 3,
    }


@pytest.fixture
def valid_plan():
    return {
        "modality": "zone2",
        "durationMin": 45,
        "intensity": "moderate",
        "rationale": "Good sleep and low soreness support steady aerobic work.",
        "stopIf": ["Chest pain", "Dizziness"],
        "activities": [
            {"type": "warmup", "description": "Easy jog", "durationMin": 10, "intensity": "easy"},
            {"type": "main", "description": "Zone 2 run", "durationMin": 30, "intensity": "moderate"},
            {"type": "cooldown", "description": "Walk and stretch", "durationMin": 5, "intensity": "easy"},
        ],
    }
