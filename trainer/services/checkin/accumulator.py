"""
Check-in accumulation.

Merges validated extractions into the conversation's partial check-in and
reports which required fields are still unknown.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from trainer.services.checkin.field_specs import FieldSpecRegistry, DEFAULT_REGISTRY

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Result of merging an extraction into a prior record."""
    record: Dict[str, Any]
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return not self.errors


class CheckInAccumulator:
    """
    Owns the merge and completion rules for a partial check-in.
    """

    def __init__(self, registry: Optional[FieldSpecRegistry] = None):
        self._registry = registry or DEFAULT_REGISTRY

    @property
    def registry(self) -> FieldSpecRegistry:
        return self._registry

    def merge(self, prior: Dict[str, Any], incoming: Dict[str, Any]) -> MergeResult:
        """
        Shallow right-biased merge.

        Fields present in ``incoming`` overwrite ``prior``; absent fields keep
        their prior value. A later sorenessAreas list replaces the earlier one.
        If the union violates any field spec the merge is rejected and the
        prior record comes back unchanged.

        Args:
            prior: Current partial check-in
            incoming: Validated extraction for this turn

        Returns:
            MergeResult with the new record, or the prior one plus errors
        """
        candidate = {**prior, **incoming}
        normalized, errors = self._registry.normalize_record(candidate)

        if errors:
            logger.warning(f"Rejected check-in merge: {errors}")
            return MergeResult(record=dict(prior), errors=errors)

        return MergeResult(record=normalized)

    def missing_required(self, record: Dict[str, Any]) -> List[str]:
        """
        Required fields not yet known, in declaration order.

        A field only counts as known when it holds a number.
        """
        return [
            name
            for name in self._registry.required_names
            if not _is_number(record.get(name))
        ]

    def is_complete(self, record: Dict[str, Any]) -> bool:
        return not self.missing_required(record)

    def validate_record(self, record: Dict[str, Any]) -> List[Dict[str, str]]:
        """Field violations for a whole record (empty list when valid)."""
        _, errors = self._registry.normalize_record(record)
        return errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
