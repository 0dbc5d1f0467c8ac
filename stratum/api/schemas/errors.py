"""Error envelope returned by every failing request.

Errors share the ``success`` flag with the success envelopes, so a client
can tell the two apart without looking at the status code. Field-level
validation failures are listed in ``errors``, one entry per failing
field, in addition to the ``details.validation_errors`` mapping.

Debug information is only populated in development environments.
"""

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Identifies the service that produced an error."""

    name: str = Field(
        ...,
        description="Name of the service",
        examples=["Stratum"],
    )
    version: str = Field(
        ...,
        description="Version of the service",
        examples=["0.1.0"],
    )
    environment: str = Field(
        ...,
        description="Environment where the service is running",
        examples=["development", "staging", "production"],
    )


class FieldError(BaseModel):
    """A single field that failed validation."""

    field: str = Field(
        ...,
        description="Dotted path of the failing field",
        examples=["email", "items.0.price"],
    )
    message: str = Field(
        ...,
        description="Why the value was rejected",
        examples=["String should have at least 1 character"],
    )
    type: str = Field(
        ...,
        description="Machine-readable error type",
        examples=["string_too_short", "missing", "extra_forbidden"],
    )


class ErrorResponse(BaseModel):
    """Standardized error response model for API errors."""

    success: Literal[False] = Field(
        default=False, description="Always false for error responses"
    )

    error_code: str = Field(
        ...,
        description="Unique error code identifying the error type",
        examples=["VALIDATION_ERROR", "NOT_FOUND", "CONFLICT"],
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Request validation failed", "User with ID 123 not found"],
    )

    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details",
        examples=[{"validation_errors": {"email": ["Invalid email address"]}}],
    )

    errors: list[FieldError] | None = Field(
        default=None,
        description="Field-level validation failures, when the error has any",
    )

    correlation_id: str | None = Field(
        default=None,
        description="Request correlation ID for tracing and debugging",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )

    request_id: str | None = Field(
        default=None,
        description=(
            "Unique request identifier (different from correlation_id "
            "which can span multiple services)"
        ),
        examples=["req-550e8400-e29b-41d4-a716-446655440000"],
    )

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Timestamp when the error occurred (with timezone)",
    )

    severity: str | None = Field(
        default=None,
        description="Error severity level (LOW, MEDIUM, HIGH, CRITICAL)",
        examples=["LOW", "HIGH"],
    )

    service_info: ServiceInfo | None = Field(
        default=None,
        description="Information about the service that generated the error",
    )

    debug_info: dict[str, Any] | None = Field(
        default=None,
        description="Debug information (only populated in development environments)",
        examples=[
            {
                "stack_trace": ["File 'main.py', line 123, in function_name"],
                "exception_type": "ValueError",
            }
        ],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "error_code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {
                        "validation_errors": {
                            "email": ["Invalid email address"],
                            "password": ["Password must contain a digit"],
                        }
                    },
                    "errors": [
                        {
                            "field": "email",
                            "message": "Invalid email address",
                            "type": "value_error",
                        },
                        {
                            "field": "password",
                            "message": "Password must contain a digit",
                            "type": "value_error",
                        },
                    ],
                    "correlation_id": "550e8400-e29b-41d4-a716-446655440000",
                    "request_id": "req-660e8400-e29b-41d4-a716-446655440000",
                    "timestamp": "2024-06-14T12:00:00+00:00",
                    "severity": "LOW",
                },
                {
                    "success": False,
                    "error_code": "CONFLICT",
                    "message": "A user with this email already exists",
                    "correlation_id": "550e8400-e29b-41d4-a716-446655440001",
                    "request_id": "req-660e8400-e29b-41d4-a716-446655440001",
                    "timestamp": "2024-06-14T12:00:01+00:00",
                    "severity": "LOW",
                    "service_info": {
                        "name": "Stratum",
                        "version": "0.1.0",
                        "environment": "staging",
                    },
                },
            ]
        }
    }


ERROR_DESCRIPTIONS: dict[int, str] = {
    400: "The request was well-formed but rejected by a business check",
    401: "Missing or invalid credentials",
    404: "The resource does not exist",
    409: "The request conflicts with an existing resource",
    422: "The request failed validation or broke a business rule",
}


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """Build the ``responses`` mapping documenting error statuses in OpenAPI.

    Args:
        *status_codes: HTTP statuses the route can fail with.

    Returns:
        dict[int | str, dict[str, Any]]: Value for a route's ``responses``.
    """
    return {
        code: {"model": ErrorResponse, "description": ERROR_DESCRIPTIONS[code]}
        for code in status_codes
    }
