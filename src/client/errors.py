"""Client-side error type.

Every failed API call surfaces as ApiError. Problem-details bodies
(RFC 9457) are unpacked into the message, status code and field-level
validation map.
"""

from typing import Any

import httpx


class ApiError(Exception):
    """Error raised by ApiClient and stored by hooks.

    Attributes:
        message: Human-readable message (problem ``detail`` when present).
        status_code: HTTP status, or None when no response was received.
        validation_errors: Field name to messages, for 400/422 responses.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        validation_errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.validation_errors = validation_errors

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status_code={self.status_code})"

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build an ApiError from a non-2xx response.

        Falls back to a generic message when the body is not a problem
        details object.

        Args:
            response: The failed HTTP response.

        Returns:
            ApiError: Error with message, status and validation errors.
        """
        message = f"Request failed with status {response.status_code}"
        validation_errors: dict[str, list[str]] | None = None

        try:
            body: Any = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = body.get("detail") or body.get("title") or message
            errors = body.get("errors")
            if isinstance(errors, dict):
                validation_errors = {
                    str(field): [str(m) for m in messages]
                    for field, messages in errors.items()
                    if isinstance(messages, list)
                }

        return cls(
            message=message,
            status_code=response.status_code,
            validation_errors=validation_errors,
        )
