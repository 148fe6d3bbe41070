"""
Follow-up policy for the intake conversation.

Deterministic post-processing over the model's reply: while required
fields are missing the athlete is always asked for something, and once the
check-in is complete the reply is a closing confirmation with no question,
so the conversation cannot loop.
"""

from typing import List, Optional, Sequence

from trainer.services.checkin.field_specs import FieldSpecRegistry, DEFAULT_REGISTRY


class FollowUpPolicy:
    """
    Decides the user-facing reply for an intake turn.
    """

    COMPLETE_PROMPT = "Perfect, I have what I need to build your plan."
    CONFIRMATION = "Awesome, thanks. I have everything I need."
    MAX_FIELDS_PER_QUESTION = 2

    def __init__(self, registry: Optional[FieldSpecRegistry] = None):
        self._registry = registry or DEFAULT_REGISTRY

    def build_follow_up_prompt(self, missing: Sequence[str]) -> str:
        """
        Ask for at most the first two missing fields.

        Args:
            missing: Missing required field names in declaration order

        Returns:
            A prompt sentence
        """
        if not missing:
            return self.COMPLETE_PROMPT

        labels = self._labels(missing[:self.MAX_FIELDS_PER_QUESTION])

        if len(labels) == 1:
            return f"Thanks, that helps. One more quick one: {labels[0]}?"

        return f"Got it. To dial this in, can you quickly share your {' and '.join(labels)}?"

    def finalize_reply(self, model_text: Optional[str], missing: Sequence[str]) -> str:
        """
        Filter the model's reply.

        Args:
            model_text: Coach reply produced by the model (untrusted)
            missing: Missing required field names after this turn's merge

        Returns:
            Reply to show the athlete
        """
        trimmed = (model_text or "").strip()

        if missing:
            return trimmed or self.build_follow_up_prompt(missing)

        if not trimmed or "?" in trimmed:
            return self.CONFIRMATION

        return trimmed

    def _labels(self, names: Sequence[str]) -> List[str]:
        labels = []
        for name in names:
            if name in self._registry:
                labels.append(self._registry.get(name).prompt_label)
            else:
                labels.append(name)
        return labels
