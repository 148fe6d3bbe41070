"""Unit tests for generated-plan contract validation."""

import pytest

from trainer.schemas.plan import GeneratedPlan
from trainer.services.plan.plan_validator import PlanContractValidator, PlanContractError


@pytest.fixture
def validator():
    return PlanContractValidator()


class TestPlanContractValidator:
    def test_valid_plan_accepted(self, validator, valid_plan):
        plan = validator.validate(valid_plan)

        assert isinstance(plan, GeneratedPlan)
        assert plan.modality == "zone2"
        assert len(plan.activities) == 3

    def test_missing_activities_named(self, validator, valid_plan):
        del valid_plan["activities"]

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert exc_info.value.fields == ["activities"]

    def test_extra_top_level_key_rejected(self, validator, valid_plan):
        valid_plan["date"] = "2026-10-17"

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert "date" in exc_info.value.fields

    def test_wrapped_plan_rejected(self, validator, valid_plan):
        with pytest.raises(PlanContractError) as exc_info:
            validator.validate({"workoutPlan": valid_plan})

        assert "workoutPlan" in exc_info.value.fields
        assert "modality" in exc_info.value.fields

    def test_unknown_enum_values_rejected(self, validator, valid_plan):
        valid_plan["modality"] = "crossfit"
        valid_plan["intensity"] = "extreme"

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert set(exc_info.value.fields) == {"modality", "intensity"}

    @pytest.mark.parametrize("duration", [-5, 181, 30.5, "45"])
    def test_bad_duration_rejected(self, validator, valid_plan, duration):
        valid_plan["durationMin"] = duration

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert exc_info.value.fields == ["durationMin"]

    def test_activity_duration_checked(self, validator, valid_plan):
        valid_plan["activities"][1]["durationMin"] = 500

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert exc_info.value.fields == ["activities[1].durationMin"]

    def test_empty_activities_rejected(self, validator, valid_plan):
        valid_plan["activities"] = []

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert exc_info.value.fields == ["activities"]

    def test_stop_if_must_be_strings(self, validator, valid_plan):
        valid_plan["stopIf"] = ["Dizziness", 3]

        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(valid_plan)

        assert exc_info.value.fields == ["stopIf[1]"]

    def test_duration_sum_not_enforced(self, validator, valid_plan):
        valid_plan["durationMin"] = 90

        assert validator.validate(valid_plan).durationMin == 90

    def test_non_mapping_rejected(self, validator):
        with pytest.raises(PlanContractError) as exc_info:
            validator.validate(["not", "a", "plan"])

        assert exc_info.value.fields == ["plan"]
