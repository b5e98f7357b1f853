"""Declarative field validation.

Commands declare their field constraints as a tuple of rules. The dispatcher
evaluates every rule before the handler body runs and collects violations per
field, keyed by the camelCase name the client sent.

Paths use attribute names and may address every item of a list with ``[]``:

    MaxLength("name", 100)
    Required("emergency_contacts[].phone")

Usage:
    from src.core.validation import MaxLength, Pattern, Required, validate_fields

    result = validate_fields(command, (Required("name"), MaxLength("name", 100)))
    match result:
        case Success():
            ...
        case Failure(error=error):
            error.field_errors  # {"name": ["name is required"]}
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic.alias_generators import to_camel

from src.core.enums import ErrorCode
from src.core.errors import RequestValidationError
from src.core.result import Failure, Result, Success

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

_MISSING = object()


@dataclass(frozen=True)
class FieldRule(ABC):
    """Base class for a constraint on one field path."""

    path: str

    @abstractmethod
    def check(self, value: Any, label: str) -> str | None:
        """Return an error message, or None when the value is acceptable."""


@dataclass(frozen=True)
class Required(FieldRule):
    def check(self, value: Any, label: str) -> str | None:
        if value is None or value is _MISSING:
            return f"{label} is required"
        if isinstance(value, str) and not value.strip():
            return f"{label} is required"
        if isinstance(value, (list, tuple)) and not value:
            return f"{label} must contain at least one item"
        return None


@dataclass(frozen=True)
class MaxLength(FieldRule):
    max_length: int

    def check(self, value: Any, label: str) -> str | None:
        if isinstance(value, str) and len(value) > self.max_length:
            return f"{label} must be at most {self.max_length} characters"
        return None


@dataclass(frozen=True)
class Range(FieldRule):
    minimum: float | None = None
    maximum: float | None = None

    def check(self, value: Any, label: str) -> str | None:
        if value is None or value is _MISSING:
            return None
        too_low = self.minimum is not None and value < self.minimum
        too_high = self.maximum is not None and value > self.maximum
        if not (too_low or too_high):
            return None
        if self.minimum is not None and self.maximum is not None:
            return f"{label} must be between {self.minimum} and {self.maximum}"
        if too_low:
            return f"{label} must be at least {self.minimum}"
        return f"{label} must be at most {self.maximum}"


@dataclass(frozen=True)
class Pattern(FieldRule):
    pattern: str
    message: str | None = None

    def check(self, value: Any, label: str) -> str | None:
        if value is None or value is _MISSING or value == "":
            return None
        if not isinstance(value, str) or re.match(self.pattern, value) is None:
            return self.message or f"{label} has an invalid format"
        return None


@dataclass(frozen=True)
class HexColor(Pattern):
    pattern: str = HEX_COLOR_PATTERN
    message: str | None = None

    def check(self, value: Any, label: str) -> str | None:
        error = super().check(value, label)
        if error is not None and self.message is None:
            return f"{label} must be a valid hex color (e.g. #FF0000)"
        return error


@dataclass(frozen=True)
class Email(Pattern):
    pattern: str = EMAIL_PATTERN
    message: str | None = "Invalid email format"


@dataclass(frozen=True)
class OneOf(FieldRule):
    choices: tuple[Any, ...]
    case_insensitive: bool = True

    def check(self, value: Any, label: str) -> str | None:
        if value is None or value is _MISSING:
            return None
        candidate = value.lower() if self.case_insensitive and isinstance(value, str) else value
        if candidate not in self.choices:
            options = ", ".join(str(choice) for choice in self.choices)
            return f"Invalid {label}. Must be one of: {options}."
        return None


def wire_name(path: str) -> str:
    """Convert an attribute path to the camelCase name used on the wire.

    >>> wire_name("emergency_contacts[2].is_primary")
    'emergencyContacts[2].isPrimary'
    """
    parts = []
    for segment in path.split("."):
        name, bracket, rest = segment.partition("[")
        parts.append(to_camel(name) + (bracket + rest if bracket else ""))
    return ".".join(parts)


def _resolve(target: Any, path: str) -> Iterator[tuple[str, Any]]:
    """Yield (concrete_path, value) pairs for a rule path.

    ``[]`` fans out over list items; missing attributes resolve to a sentinel
    so Required can report them.
    """
    head, _, tail = path.partition(".")
    is_each = head.endswith("[]")
    name = head[:-2] if is_each else head

    if isinstance(target, dict):
        value = target.get(name, _MISSING)
    else:
        value = getattr(target, name, _MISSING)

    if is_each:
        if not isinstance(value, (list, tuple)):
            return
        for index, item in enumerate(value):
            concrete = f"{name}[{index}]"
            if tail:
                for sub_path, sub_value in _resolve(item, tail):
                    yield f"{concrete}.{sub_path}", sub_value
            else:
                yield concrete, item
        return

    if tail:
        if value is None or value is _MISSING:
            return
        for sub_path, sub_value in _resolve(value, tail):
            yield f"{name}.{sub_path}", sub_value
        return

    yield name, value


def collect_field_errors(target: Any, rules: Iterable[FieldRule]) -> dict[str, list[str]]:
    """Evaluate rules and group messages by wire field name."""
    errors: dict[str, list[str]] = {}
    for rule in rules:
        for concrete_path, value in _resolve(target, rule.path):
            field_name = wire_name(concrete_path)
            message = rule.check(value, field_name)
            if message is not None:
                errors.setdefault(field_name, []).append(message)
    return errors


def validate_fields(
    target: Any, rules: Iterable[FieldRule]
) -> Result[None, RequestValidationError]:
    """Validate a request object against declarative rules.

    Args:
        target: Command/query dataclass (or dict) to check.
        rules: Rules to evaluate; all are evaluated, none short-circuit.

    Returns:
        Success(None) if no rule fails, otherwise Failure with every message
        grouped by field.
    """
    errors = collect_field_errors(target, rules)
    if errors:
        return Failure(
            error=RequestValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="One or more validation errors occurred",
                errors=errors,
            )
        )
    return Success(value=None)
