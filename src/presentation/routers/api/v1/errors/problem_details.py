"""RFC 9457 Problem Details for HTTP APIs.

This module implements RFC 9457 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Standard error response format providing structured information about errors
    in HTTP APIs. ``errors`` is the per-field message map clients render next
    to form inputs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional field name to messages map (for validation failures)
        trace_id: Optional request trace ID for debugging (``traceId`` on the wire)

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/validation_failed",
        ...     title="Validation Failed",
        ...     status=400,
        ...     detail="One or more validation errors occurred",
        ...     instance="/api/v1/teams/6f1c.../players",
        ...     errors={"squadNumber": ["Squad number must be between 1 and 99"]},
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation_failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["One or more validation errors occurred"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/teams"],
    )
    errors: dict[str, list[str]] | None = Field(
        None,
        description="Field name to list of error messages",
    )
    trace_id: str | None = Field(
        None,
        alias="traceId",
        description="Request trace ID for debugging",
    )

    def to_content(self) -> dict:
        """JSON body with camelCase keys and absent members omitted."""
        return self.model_dump(exclude_none=True, by_alias=True)
