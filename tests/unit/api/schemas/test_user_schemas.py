"""Unit tests for the user schemas."""

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest
from pydantic import ValidationError

from stratum.api.schemas.users import (
    UserCreate,
    UserResponse,
    UserSummary,
    UserUpdate,
)

NOW = datetime(2024, 6, 14, 12, 0, tzinfo=UTC)


def _create_payload(**overrides: Any) -> dict[str, Any]:  # noqa: ANN401
    payload: dict[str, Any] = {
        "email": "Ada@Example.com",
        "full_name": "Ada Lovelace",
        "password": "s3cretpass",
        "password_confirm": "s3cretpass",
    }
    payload.update(overrides)
    return payload


def _error_messages(exc: ValidationError) -> list[str]:
    return [error["msg"] for error in exc.errors()]


@pytest.mark.unit
class TestUserCreate:
    """Create payload validation."""

    def test_valid_payload(self) -> None:
        """Emails are normalized and ``is_active`` defaults to true."""
        user = UserCreate.model_validate(_create_payload())

        assert user.email == "ada@example.com"
        assert user.is_active is True

    @pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.de", "@example.com"])
    def test_invalid_email(self, email: str) -> None:
        """Addresses without a local part, domain and TLD are rejected."""
        with pytest.raises(ValidationError, match="Invalid email address"):
            UserCreate.model_validate(_create_payload(email=email))

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("short1", "at least 8 characters"),
            ("onlyletters", "must contain a digit"),
            ("1234567890", "must contain a letter"),
            ("a1" + "é" * 36, "at most 72 bytes"),
        ],
    )
    def test_password_policy(self, password: str, message: str) -> None:
        """Weak or over-long passwords are rejected with a specific reason."""
        with pytest.raises(ValidationError, match=message):
            UserCreate.model_validate(
                _create_payload(password=password, password_confirm=password)
            )

    def test_password_min_length_is_configurable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The minimum length follows the security settings."""
        monkeypatch.setenv("SECURITY_CONFIG__PASSWORD_MIN_LENGTH", "12")

        with pytest.raises(ValidationError, match="at least 12 characters"):
            UserCreate.model_validate(_create_payload())

    def test_passwords_must_match(self) -> None:
        """The confirmation must repeat the password."""
        with pytest.raises(ValidationError) as exc_info:
            UserCreate.model_validate(_create_payload(password_confirm="s3cretpasS"))

        assert any("Passwords do not match" in m for m in _error_messages(exc_info.value))

    @pytest.mark.parametrize("field", ["email", "full_name", "password"])
    def test_required_fields(self, field: str) -> None:
        """Missing required fields are reported by name."""
        payload = _create_payload()
        del payload[field]

        with pytest.raises(ValidationError) as exc_info:
            UserCreate.model_validate(payload)

        assert (field,) in [error["loc"] for error in exc_info.value.errors()]

    def test_full_name_length(self) -> None:
        """Names must be 1 to 100 characters long."""
        with pytest.raises(ValidationError):
            UserCreate.model_validate(_create_payload(full_name=""))
        with pytest.raises(ValidationError):
            UserCreate.model_validate(_create_payload(full_name="x" * 101))

    @pytest.mark.parametrize("full_name", [" ", "\t\n", "   "])
    def test_blank_full_name_rejected(self, full_name: str) -> None:
        """Whitespace-only names are stripped to empty and fail the length check."""
        with pytest.raises(ValidationError, match="at least 1 character"):
            UserCreate.model_validate(_create_payload(full_name=full_name))

    def test_full_name_is_stripped(self) -> None:
        """Surrounding whitespace is not stored."""
        user = UserCreate.model_validate(
            _create_payload(full_name="  Ada Lovelace \n")
        )

        assert user.full_name == "Ada Lovelace"

    def test_password_keeps_surrounding_whitespace(self) -> None:
        """Passwords are kept exactly as typed."""
        user = UserCreate.model_validate(
            _create_payload(password=" s3cretpass ", password_confirm=" s3cretpass ")
        )

        assert user.password == " s3cretpass "

    def test_rejects_hashed_password_in_payload(self) -> None:
        """Clients cannot set storage-only fields."""
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            UserCreate.model_validate(_create_payload(hashed_password="$2b$..."))


@pytest.mark.unit
class TestUserUpdate:
    """Partial update validation."""

    def test_partial_update(self) -> None:
        """Only sent fields are returned, normalized."""
        update = UserUpdate.model_validate({"email": "NEW@Example.com"})

        assert update.to_update_dict() == {"email": "new@example.com"}

    @pytest.mark.parametrize("field", ["email", "full_name", "is_active"])
    def test_non_nullable_fields(self, field: str) -> None:
        """Identity fields can be replaced but not cleared."""
        with pytest.raises(ValidationError, match="Field cannot be null"):
            UserUpdate.model_validate({field: None})

    def test_blank_full_name_rejected(self) -> None:
        """A whitespace-only replacement name is rejected."""
        with pytest.raises(ValidationError, match="at least 1 character"):
            UserUpdate.model_validate({"full_name": "   "})

    def test_password_change_requires_confirmation(self) -> None:
        """A new password without its confirmation is rejected."""
        with pytest.raises(ValidationError, match="Passwords do not match"):
            UserUpdate.model_validate({"password": "n3wpassword"})

    def test_password_change_drops_confirmation(self) -> None:
        """The confirmation is checked, then left out of the update."""
        update = UserUpdate.model_validate(
            {"password": "n3wpassword", "password_confirm": "n3wpassword"}
        )

        assert update.to_update_dict() == {"password": "n3wpassword"}

    def test_password_policy_applies(self) -> None:
        """Updated passwords follow the same policy as new ones."""
        with pytest.raises(ValidationError, match="must contain a digit"):
            UserUpdate.model_validate(
                {"password": "nodigitshere", "password_confirm": "nodigitshere"}
            )


@pytest.mark.unit
class TestUserResponse:
    """Output schemas."""

    def test_response_never_exposes_password(self) -> None:
        """The stored hash stays out of the serialized user."""
        row = SimpleNamespace(
            id=1,
            email="ada@example.com",
            full_name="Ada Lovelace",
            is_active=True,
            hashed_password="$2b$04$hash",
            created_at=NOW,
            updated_at=NOW,
        )

        dumped = UserResponse.from_orm_model(row).model_dump(mode="json")

        assert "hashed_password" not in dumped
        assert "password" not in dumped
        assert dumped["email"] == "ada@example.com"

    def test_summary(self) -> None:
        """Summaries expose only identity fields."""
        row = SimpleNamespace(
            id=2, email="b@example.com", full_name="B", hashed_password="x"
        )

        assert UserSummary.model_validate(row).model_dump() == {
            "id": 2,
            "email": "b@example.com",
            "full_name": "B",
        }
