"""
Check-in field specifications.

Static description of the daily check-in fields: name, value kind,
inclusive range and human-readable label. Every component that reads or
writes a check-in record goes through this registry, so bounds live in one
place and can be configured (sleep quality is collected on 1-10 by default,
1-5 by some clients).

Parsing is explicit and typed: each parser returns a ParseResult instead of
raising, which keeps callers free of try/except around untrusted values.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple


NUMBER = "number"
INTEGER = "integer"
STRING = "string"
STRING_LIST = "string_list"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one untrusted value."""
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(ok=False, error=error)


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _is_real_number(value: Any) -> bool:
    # bool is an int subclass; a JSON true is never a rating
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _check_range(value: float, min_value: Optional[float], max_value: Optional[float]) -> Optional[str]:
    if min_value is not None and value < min_value:
        if max_value is None:
            return f"must be at least {_format_bound(min_value)}"
        return f"must be between {_format_bound(min_value)} and {_format_bound(max_value)}"
    if max_value is not None and value > max_value:
        if min_value is None:
            return f"must be at most {_format_bound(max_value)}"
        return f"must be between {_format_bound(min_value)} and {_format_bound(max_value)}"
    return None


def parse_number(
    value: Any,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> ParseResult:
    """Accept a finite int or float inside the inclusive range."""
    if not _is_real_number(value):
        return ParseResult.failure("must be a number")

    error = _check_range(value, min_value, max_value)
    if error:
        return ParseResult.failure(error)

    return ParseResult.success(value)


def parse_integer(
    value: Any,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> ParseResult:
    """Accept an integer (or an integral float such as 7.0) inside the inclusive range."""
    if not _is_real_number(value):
        return ParseResult.failure("must be an integer")

    if isinstance(value, float):
        if not value.is_integer():
            return ParseResult.failure("must be an integer")
        value = int(value)

    error = _check_range(value, min_value, max_value)
    if error:
        return ParseResult.failure(error)

    return ParseResult.success(value)


def parse_string(value: Any) -> ParseResult:
    if not isinstance(value, str):
        return ParseResult.failure("must be a string")
    return ParseResult.success(value)


def parse_string_list(value: Any) -> ParseResult:
    if not isinstance(value, list):
        return ParseResult.failure("must be a list of strings")
    if not all(isinstance(item, str) for item in value):
        return ParseResult.failure("must be a list of strings")
    return ParseResult.success(list(value))


@dataclass(frozen=True)
class FieldSpec:
    """One check-in field."""
    name: str
    kind: str
    label: str
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    required: bool = False

    @property
    def prompt_label(self) -> str:
        """Label used when asking the athlete, e.g. 'sleep quality (1-10)'."""
        if self.min_value is None or self.max_value is None:
            return self.label
        return f"{self.label} ({_format_bound(self.min_value)}-{_format_bound(self.max_value)})"

    @property
    def contract_type(self) -> str:
        """Type description given to the model in the output contract."""
        return {
            NUMBER: "number | null",
            INTEGER: "number | null",
            STRING: "string | null",
            STRING_LIST: "string[] | null",
        }[self.kind]

    def parse(self, value: Any) -> ParseResult:
        """Parse an untrusted value against this field. Never raises."""
        if self.kind == NUMBER:
            return parse_number(value, self.min_value, self.max_value)
        if self.kind == INTEGER:
            return parse_integer(value, self.min_value, self.max_value)
        if self.kind == STRING:
            return parse_string(value)
        if self.kind == STRING_LIST:
            return parse_string_list(value)
        return ParseResult.failure(f"unsupported field kind '{self.kind}'")


class FieldSpecRegistry:
    """
    Ordered collection of check-in field specs.

    Declaration order is significant: missing required fields are always
    reported in this order.
    """

    def __init__(self, specs: List[FieldSpec]):
        self._specs: Dict[str, FieldSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate field spec: {spec.name}")
            self._specs[spec.name] = spec

    @classmethod
    def default(cls, sleep_quality_max: int = 10) -> "FieldSpecRegistry":
        """Build the standard daily check-in registry."""
        if sleep_quality_max < 2:
            raise ValueError("sleep_quality_max must be at least 2")

        return cls([
            FieldSpec("sleepHours", NUMBER, "hours of sleep", 0, 24, required=True),
            FieldSpec("sleepQuality", INTEGER, "sleep quality", 1, sleep_quality_max, required=True),
            FieldSpec("energy", INTEGER, "energy", 1, 10, required=True),
            FieldSpec("soreness", INTEGER, "soreness", 0, 10, required=True),
            FieldSpec("stress", INTEGER, "stress", 1, 10, required=True),
            FieldSpec("sorenessAreas", STRING_LIST, "sore areas"),
            FieldSpec("notes", STRING, "notes"),
        ])

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._specs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, name: str) -> FieldSpec:
        return self._specs[name]

    @property
    def required(self) -> List[FieldSpec]:
        return [spec for spec in self._specs.values() if spec.required]

    @property
    def required_names(self) -> List[str]:
        return [spec.name for spec in self.required]

    def normalize_record(self, record: Dict[str, Any]) -> Tuple[Dict[str, Any], List[Dict[str, str]]]:
        """
        Re-parse every present field of a record.

        Args:
            record: Check-in mapping (absent key = unknown)

        Returns:
            tuple of (normalized_record, violations). Violations are
            {"field", "message"} dicts; an explicit null and an unknown key
            are both violations.
        """
        normalized: Dict[str, Any] = {}
        violations: List[Dict[str, str]] = []

        for name, value in record.items():
            if name not in self._specs:
                violations.append({"field": name, "message": "unknown field"})
                continue

            if value is None:
                violations.append({"field": name, "message": "must not be null"})
                continue

            result = self._specs[name].parse(value)
            if result.ok:
                normalized[name] = result.value
            else:
                violations.append({"field": name, "message": result.error})

        return normalized, violations


# Registry with the standard bounds
DEFAULT_REGISTRY = FieldSpecRegistry.default()
