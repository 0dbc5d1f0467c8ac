"""Schemas for the user resource.

Passwords travel only inward: ``UserCreate`` and ``UserUpdate`` accept
them, while ``UserResponse`` and ``UserSummary`` have no password field at
all, so neither the plain text nor the stored hash can be serialized.
"""

import re
from typing import Annotated, ClassVar, Self

from pydantic import Field, StringConstraints, field_validator, model_validator

from stratum.api.schemas.base import (
    BaseSchema,
    CreateSchema,
    ResponseSchema,
    UpdateSchema,
)
from stratum.core.config import get_settings
from stratum.core.constants import BCRYPT_MAX_PASSWORD_BYTES
from stratum.core.types import UpdateData

EMAIL_MAX_LENGTH = 255
FULL_NAME_MAX_LENGTH = 100
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Passwords are hashed byte for byte, so they opt out of whitespace stripping
RawPassword = Annotated[str, StringConstraints(strip_whitespace=False)]


def normalize_email(value: str) -> str:
    """Strip and lower-case an email address, then check its shape.

    Args:
        value: Raw email from the request.

    Returns:
        str: The normalized email.

    Raises:
        ValueError: If the value does not look like ``local@domain.tld``.
    """
    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValueError("Invalid email address")
    return email


def check_password_strength(value: str) -> str:
    """Apply the password policy.

    The minimum length is configurable; the maximum is bcrypt's input
    limit, measured in UTF-8 bytes.

    Args:
        value: Plain text password.

    Returns:
        str: The unchanged password.

    Raises:
        ValueError: If the password violates the policy.
    """
    min_length = get_settings().security_config.password_min_length
    if len(value) < min_length:
        raise ValueError(f"Password must be at least {min_length} characters long")
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
        )
    if not any(char.isalpha() for char in value):
        raise ValueError("Password must contain a letter")
    if not any(char.isdigit() for char in value):
        raise ValueError("Password must contain a digit")
    return value


class UserBase(BaseSchema):
    """Fields shared by user input and output."""

    email: str = Field(
        ...,
        max_length=EMAIL_MAX_LENGTH,
        description="Email address, stored lower-cased",
        examples=["ada@example.com"],
    )
    full_name: str = Field(
        ...,
        min_length=1,
        max_length=FULL_NAME_MAX_LENGTH,
        description="Display name",
        examples=["Ada Lovelace"],
    )
    is_active: bool = Field(default=True, description="Whether the account is active")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize the email address."""
        return normalize_email(v)


class UserCreate(UserBase, CreateSchema):
    """Body of ``POST /users``."""

    password: RawPassword = Field(
        ...,
        description="Plain text password, never returned",
        examples=["s3cretpass"],
    )
    password_confirm: RawPassword = Field(
        ...,
        description="Must repeat ``password`` exactly",
        examples=["s3cretpass"],
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Enforce the password policy."""
        return check_password_strength(v)

    @model_validator(mode="after")
    def passwords_match(self) -> Self:
        """Require the confirmation to repeat the password."""
        if self.password != self.password_confirm:
            raise ValueError("Passwords do not match")
        return self


class UserUpdate(UpdateSchema):
    """Body of ``PATCH /users/{id}``.

    Changing the password requires ``password_confirm`` as well.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"email", "full_name", "is_active", "password", "password_confirm"}
    )

    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)
    full_name: str | None = Field(
        default=None, min_length=1, max_length=FULL_NAME_MAX_LENGTH
    )
    is_active: bool | None = None
    password: RawPassword | None = None
    password_confirm: RawPassword | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        """Normalize the email address when one is sent."""
        return normalize_email(v) if v is not None else v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        """Enforce the password policy when a password is sent."""
        return check_password_strength(v) if v is not None else v

    @model_validator(mode="after")
    def passwords_match(self) -> Self:
        """Require a matching confirmation whenever either password field is set."""
        sent = {"password", "password_confirm"} & self.model_fields_set
        if sent and self.password != self.password_confirm:
            raise ValueError("Passwords do not match")
        return self

    def to_update_dict(self) -> UpdateData:
        """Return the sent fields, without the confirmation."""
        data = super().to_update_dict()
        data.pop("password_confirm", None)
        return data


class UserResponse(UserBase, ResponseSchema):
    """A user as returned by the API."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "email": "ada@example.com",
                    "full_name": "Ada Lovelace",
                    "is_active": True,
                    "created_at": "2024-06-14T12:00:00+00:00",
                    "updated_at": "2024-06-14T12:00:00+00:00",
                }
            ]
        }
    }


class UserSummary(BaseSchema):
    """Compact user representation embedded in other resources."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    full_name: str
