"""Unit tests for sensitive data sanitization."""

from typing import Any

import pytest

from stratum.core.constants import REDACTED
from stratum.core.error_context import (
    is_sensitive_field,
    is_sensitive_header,
    sanitize_dict,
    sanitize_error_context,
    sanitize_headers,
    sanitize_sql_params,
    sanitize_validation_errors,
)
from stratum.core.exceptions import ValidationError


@pytest.mark.unit
class TestSensitiveDetection:
    """Field and header name matching."""

    @pytest.mark.parametrize(
        "field",
        ["password", "password_confirm", "hashed_password", "api_key", "AuthToken"],
    )
    def test_sensitive_fields(self, field: str) -> None:
        """Credential-like names are sensitive."""
        assert is_sensitive_field(field)

    @pytest.mark.parametrize("field", ["email", "full_name", "sku", "price"])
    def test_regular_fields(self, field: str) -> None:
        """Ordinary resource fields are not sensitive."""
        assert not is_sensitive_field(field)

    def test_headers(self) -> None:
        """Header matching is case-insensitive."""
        assert is_sensitive_header("Authorization")
        assert not is_sensitive_header("X-Correlation-ID")


@pytest.mark.unit
class TestSanitizers:
    """Recursive redaction helpers."""

    def test_sanitize_dict_is_recursive(self) -> None:
        """Nested sensitive keys are redacted, the rest is kept."""
        data = {
            "email": "ada@example.com",
            "credentials": {"password": "s3cretpass"},
            "items": [{"token": "abc", "name": "cup"}],
        }

        result = sanitize_dict(data)

        assert result["email"] == "ada@example.com"
        assert result["credentials"] == REDACTED
        assert result["items"] == [{"token": REDACTED, "name": "cup"}]
        assert data["credentials"] == {"password": "s3cretpass"}

    def test_sanitize_headers(self) -> None:
        """Only sensitive headers are redacted."""
        headers = {"Cookie": "session=1", "Accept": "application/json"}

        assert sanitize_headers(headers) == {
            "Cookie": REDACTED,
            "Accept": "application/json",
        }

    @pytest.mark.parametrize(
        ("params", "expected"),
        [
            (None, None),
            ({"password": "x", "id": 1}, {"password": REDACTED, "id": 1}),
            ((1, "a"), (1, "a")),
            ("raw", REDACTED),
        ],
    )
    def test_sanitize_sql_params(self, params: object, expected: object) -> None:
        """Named parameters are checked by name; positional ones pass through."""
        assert sanitize_sql_params(params) == expected

    def test_sanitize_error_context(self) -> None:
        """Error attributes and extra context are both sanitized."""
        error = ValidationError("bad", context={"password": "s3cret"})

        result = sanitize_error_context(error, {"path": "/users", "token": "t"})

        assert result["error_type"] == "ValidationError"
        assert result["path"] == "/users"
        assert result["token"] == REDACTED
        assert result["error_attributes"]["context"]["password"] == REDACTED


@pytest.mark.unit
class TestSanitizeValidationErrors:
    """Redaction of rejected input in Pydantic error entries."""

    def test_redacts_input_of_sensitive_field(self) -> None:
        """A rejected password never appears in the sanitized entry."""
        errors: list[dict[str, Any]] = [
            {
                "type": "value_error",
                "loc": ("body", "password"),
                "msg": "Value error, Password must contain a digit",
                "input": "onlyletters",
                "ctx": {"error": "Password must contain a digit"},
            }
        ]

        (entry,) = sanitize_validation_errors(errors)

        assert entry["input"] == REDACTED
        assert "ctx" not in entry
        assert entry["msg"] == errors[0]["msg"]
        assert errors[0]["input"] == "onlyletters"

    def test_sanitizes_whole_body_input(self) -> None:
        """Model-level errors carry the body; its sensitive keys are redacted."""
        errors: list[dict[str, Any]] = [
            {
                "type": "value_error",
                "loc": ("body",),
                "msg": "Value error, Passwords do not match",
                "input": {"email": "a@b.co", "password": "x1", "password_confirm": "y"},
            }
        ]

        (entry,) = sanitize_validation_errors(errors)

        assert entry["input"] == {
            "email": "a@b.co",
            "password": REDACTED,
            "password_confirm": REDACTED,
        }

    def test_leaves_regular_fields_alone(self) -> None:
        """Non-sensitive inputs are kept for debugging."""
        errors: list[dict[str, Any]] = [
            {"type": "missing", "loc": ("body", "sku"), "msg": "Field required", "input": 5}
        ]

        assert sanitize_validation_errors(errors) == errors
