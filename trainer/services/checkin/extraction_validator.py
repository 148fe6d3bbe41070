"""
Check-in extraction validation.

Sanitizes the "extracted" fields a model pulled out of the athlete's
message. Each field is parsed on its own; a field that is missing, null,
mistyped or out of range is dropped and stays unknown, while every other
field in the same payload is still accepted. The whole call never fails.
"""

import logging
from typing import Any, Dict, Optional

from trainer.services.checkin.field_specs import FieldSpecRegistry, DEFAULT_REGISTRY

logger = logging.getLogger(__name__)


class ExtractionValidator:
    """
    Turns an untrusted extraction mapping into a partial check-in record.
    """

    def __init__(self, registry: Optional[FieldSpecRegistry] = None):
        self._registry = registry or DEFAULT_REGISTRY

    @property
    def registry(self) -> FieldSpecRegistry:
        return self._registry

    def validate(self, raw_extraction: Any) -> Dict[str, Any]:
        """
        Keep only well-typed, in-range fields.

        Args:
            raw_extraction: Whatever the model returned under "extracted"

        Returns:
            Partial check-in record (possibly empty)
        """
        if not isinstance(raw_extraction, dict):
            if raw_extraction is not None:
                logger.debug(f"Ignoring non-mapping extraction of type {type(raw_extraction).__name__}")
            return {}

        record: Dict[str, Any] = {}

        for spec in self._registry:
            value = raw_extraction.get(spec.name)
            if value is None:
                continue

            result = spec.parse(value)
            if result.ok:
                record[spec.name] = result.value
            else:
                logger.debug(f"Dropped extracted field '{spec.name}': {result.error}")

        return record
