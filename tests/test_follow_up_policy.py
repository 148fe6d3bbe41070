"""Unit tests for the intake follow-up policy."""

from trainer.services.checkin.field_specs import FieldSpecRegistry
from trainer.services.intake.follow_up_policy import FollowUpPolicy


class TestBuildFollowUpPrompt:
    def test_two_fields_joined_with_and(self, follow_up_policy):
        prompt = follow_up_policy.build_follow_up_prompt(["energy", "soreness", "stress"])

        assert prompt == (
            "Got it. To dial this in, can you quickly share your "
            "energy (1-10) and soreness (0-10)?"
        )

    def test_single_field(self, follow_up_policy):
        prompt = follow_up_policy.build_follow_up_prompt(["stress"])
        assert prompt == "Thanks, that helps. One more quick one: stress (1-10)?"

    def test_nothing_missing(self, follow_up_policy):
        assert follow_up_policy.build_follow_up_prompt([]) == FollowUpPolicy.COMPLETE_PROMPT

    def test_labels_follow_configured_bounds(self):
        policy = FollowUpPolicy(FieldSpecRegistry.default(sleep_quality_max=5))
        prompt = policy.build_follow_up_prompt(["sleepQuality"])
        assert "sleep quality (1-5)" in prompt


class TestFinalizeReply:
    def test_question_after_completion_replaced(self, follow_up_policy):
        assert follow_up_policy.finalize_reply("How did that feel?", []) == FollowUpPolicy.CONFIRMATION

    def test_empty_reply_after_completion_replaced(self, follow_up_policy):
        assert follow_up_policy.finalize_reply("   ", []) == FollowUpPolicy.CONFIRMATION
        assert follow_up_policy.finalize_reply(None, []) == FollowUpPolicy.CONFIRMATION

    def test_statement_after_completion_passed_through(self, follow_up_policy):
        reply = follow_up_policy.finalize_reply("  Solid night, let's build on that.  ", [])
        assert reply == "Solid night, let's build on that."

    def test_model_text_used_while_fields_missing(self, follow_up_policy):
        reply = follow_up_policy.finalize_reply(" How's your energy today? ", ["energy"])
        assert reply == "How's your energy today?"

    def test_empty_reply_while_missing_asks_deterministically(self, follow_up_policy):
        reply = follow_up_policy.finalize_reply("", ["sleepHours", "sleepQuality"])

        assert reply.endswith("hours of sleep (0-24) and sleep quality (1-10)?")
