"""Unit tests for declarative field validation.

Tests cover:
- Required: None, blank string, empty list
- Range / MaxLength / HexColor / Email / OneOf messages
- List fan-out paths (``attributes[].rating``) and camelCase field names
- validate_fields Result shape (Success / Failure with errors map)

Architecture:
- Pure functions, no mocking required
"""

from dataclasses import dataclass, field

import pytest

from src.core.enums import ErrorCode
from src.core.errors import RequestValidationError
from src.core.result import Failure, Success
from src.core.validation import (
    Email,
    FieldRule,
    HexColor,
    MaxLength,
    OneOf,
    Range,
    Required,
    collect_field_errors,
    validate_fields,
    wire_name,
)


@dataclass(frozen=True)
class Contact:
    name: str | None
    phone: str | None = None


@dataclass(frozen=True)
class Sample:
    first_name: str | None = "Ada"
    squad_number: int | None = None
    primary_color: str | None = None
    contacts: list[Contact] = field(default_factory=list)


@pytest.mark.unit
class TestWireName:
    def test_converts_snake_case_segments(self):
        assert wire_name("first_name") == "firstName"
        assert wire_name("emergency_contacts[2].is_primary") == (
            "emergencyContacts[2].isPrimary"
        )


@pytest.mark.unit
class TestRules:
    """Test individual rule messages."""

    def test_required_rejects_none_blank_and_empty_list(self):
        rule = Required("name")
        assert rule.check(None, "name") == "name is required"
        assert rule.check("   ", "name") == "name is required"
        assert rule.check([], "items") == "items must contain at least one item"
        assert rule.check("Ada", "name") is None

    def test_range_reports_both_bounds(self):
        rule = Range("squad_number", 1, 99)
        assert rule.check(0, "squadNumber") == "squadNumber must be between 1 and 99"
        assert rule.check(100, "squadNumber") == "squadNumber must be between 1 and 99"
        assert rule.check(99, "squadNumber") is None
        assert rule.check(None, "squadNumber") is None

    def test_max_length(self):
        rule = MaxLength("name", 3)
        assert rule.check("abcd", "name") == "name must be at most 3 characters"
        assert rule.check("abc", "name") is None

    def test_hex_color(self):
        rule = HexColor("primary_color")
        assert rule.check("#1A2B3C", "primaryColor") is None
        assert rule.check("", "primaryColor") is None
        assert rule.check("red", "primaryColor") == (
            "primaryColor must be a valid hex color (e.g. #FF0000)"
        )

    def test_email(self):
        rule = Email("email")
        assert rule.check("coach@club.org", "email") is None
        assert rule.check("not-an-email", "email") == "Invalid email format"

    def test_one_of_is_case_insensitive_by_default(self):
        rule = OneOf("level", ("youth", "senior"))
        assert rule.check("Senior", "level") is None
        assert rule.check("pro", "level") == (
            "Invalid level. Must be one of: youth, senior."
        )

    def test_one_of_case_sensitive(self):
        rule = OneOf("attribute_name", ("ballControl",), case_insensitive=False)
        assert rule.check("ballControl", "attributeName") is None
        assert rule.check("ballcontrol", "attributeName") is not None

    def test_rule_without_check_cannot_be_constructed(self):
        @dataclass(frozen=True)
        class Incomplete(FieldRule):
            pass

        with pytest.raises(TypeError):
            Incomplete("name")


@pytest.mark.unit
class TestValidateFields:
    """Test validate_fields and error collection."""

    def test_success_when_all_rules_pass(self):
        result = validate_fields(
            Sample(squad_number=7), (Required("first_name"), Range("squad_number", 1, 99))
        )

        assert isinstance(result, Success)
        assert result.value is None

    def test_collects_every_violation_by_wire_name(self):
        result = validate_fields(
            Sample(first_name="", squad_number=120, primary_color="blue"),
            (
                Required("first_name"),
                Range("squad_number", 1, 99),
                HexColor("primary_color"),
            ),
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, RequestValidationError)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.message == "One or more validation errors occurred"
        assert set(result.error.field_errors) == {
            "firstName",
            "squadNumber",
            "primaryColor",
        }

    def test_list_paths_fan_out_with_index(self):
        sample = Sample(contacts=[Contact(name="Mum", phone="1"), Contact(name=None)])

        errors = collect_field_errors(sample, (Required("contacts[].name"),))

        assert errors == {"contacts[1].name": ["contacts[1].name is required"]}

    def test_multiple_messages_for_one_field(self):
        errors = collect_field_errors(
            {"name": "   "}, (Required("name"), MaxLength("name", 2))
        )

        assert errors == {
            "name": ["name is required", "name must be at most 2 characters"]
        }

    def test_missing_attribute_is_reported_by_required(self):
        errors = collect_field_errors(Sample(), (Required("nickname"),))

        assert errors == {"nickname": ["nickname is required"]}
