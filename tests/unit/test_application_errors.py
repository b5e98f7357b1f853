"""Unit tests for ApplicationError mapping and problem status codes.

Tests cover:
- Domain error type → application error code
- Application error code → HTTP status and title
- Field errors surface only for validation failures
"""

import pytest

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)


@pytest.mark.unit
class TestFromDomainError:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (
                RequestValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="One or more validation errors occurred",
                    errors={"name": ["name is required"]},
                ),
                ApplicationErrorCode.VALIDATION_FAILED,
            ),
            (
                ValidationError(
                    code=ErrorCode.TEAM_ARCHIVED, message="archived", field="teamId"
                ),
                ApplicationErrorCode.VALIDATION_FAILED,
            ),
            (
                NotFoundError(
                    code=ErrorCode.TEAM_NOT_FOUND,
                    message="missing",
                    resource_type="Team",
                    resource_id="1",
                ),
                ApplicationErrorCode.NOT_FOUND,
            ),
            (
                ConflictError(
                    code=ErrorCode.SQUAD_NUMBER_TAKEN,
                    message="taken",
                    resource_type="TeamMembership",
                ),
                ApplicationErrorCode.CONFLICT,
            ),
            (
                AuthorizationError(
                    code=ErrorCode.NOT_EVALUATION_OWNER, message="not owner"
                ),
                ApplicationErrorCode.FORBIDDEN,
            ),
            (
                DomainError(code=ErrorCode.RESOURCE_CONFLICT, message="other"),
                ApplicationErrorCode.INTERNAL_ERROR,
            ),
        ],
    )
    def test_maps_error_type(self, error, expected):
        app_error = ApplicationError.from_domain_error(error)

        assert app_error.code == expected
        assert app_error.message == error.message
        assert app_error.domain_error is error

    def test_field_errors_for_validation(self):
        error = RequestValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message="One or more validation errors occurred",
            errors={"squadNumber": ["squadNumber must be between 1 and 99"]},
        )

        app_error = ApplicationError.from_domain_error(error)

        assert app_error.field_errors == {
            "squadNumber": ["squadNumber must be between 1 and 99"]
        }

    def test_no_field_errors_for_conflict(self):
        error = ConflictError(
            code=ErrorCode.SQUAD_NUMBER_TAKEN,
            message="taken",
            resource_type="TeamMembership",
            conflicting_field="squadNumber",
        )

        assert ApplicationError.from_domain_error(error).field_errors == {}


@pytest.mark.unit
class TestStatusMapping:
    @pytest.mark.parametrize(
        ("code", "status", "title"),
        [
            (ApplicationErrorCode.VALIDATION_FAILED, 400, "Validation Failed"),
            (ApplicationErrorCode.UNAUTHORIZED, 401, "Authentication Required"),
            (ApplicationErrorCode.FORBIDDEN, 403, "Access Denied"),
            (ApplicationErrorCode.NOT_FOUND, 404, "Resource Not Found"),
            (ApplicationErrorCode.CONFLICT, 409, "Resource Conflict"),
            (ApplicationErrorCode.INTERNAL_ERROR, 500, "Internal Server Error"),
        ],
    )
    def test_status_and_title(self, code, status, title):
        assert ErrorResponseBuilder._get_status_code(code) == status
        assert ErrorResponseBuilder._get_title(code) == title
