"""
Check-in services.

Field specs, extraction validation and accumulation.
"""

from trainer.services.checkin.field_specs import (
    FieldSpec,
    FieldSpecRegistry,
    ParseResult,
    DEFAULT_REGISTRY,
)
from trainer.services.checkin.extraction_validator import ExtractionValidator
from trainer.services.checkin.accumulator import CheckInAccumulator, MergeResult

__all__ = [
    "FieldSpec",
    "FieldSpecRegistry",
    "ParseResult",
    "DEFAULT_REGISTRY",
    "ExtractionValidator",
    "CheckInAccumulator",
    "MergeResult",
]
