"""Integration tests for the user endpoints."""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest
import pytest_check
from httpx import AsyncClient

CreateUser = Callable[..., Awaitable[dict[str, Any]]]
CreateItem = Callable[..., Awaitable[dict[str, Any]]]

USERS_URL = "/api/v1/users"

VALID_PAYLOAD: dict[str, Any] = {
    "email": "  Ada@Example.COM ",
    "full_name": "Ada Lovelace",
    "password": "s3cretpass",
    "password_confirm": "s3cretpass",
}


def _field_errors(body: dict[str, Any]) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = body["details"]["validation_errors"]
    return errors


@pytest.mark.integration
class TestCreateUser:
    """POST /api/v1/users."""

    async def test_created_envelope(self, client: AsyncClient) -> None:
        """A valid registration returns 201 and the success envelope."""
        response = await client.post(USERS_URL, json=VALID_PAYLOAD)

        assert response.status_code == 201
        body = response.json()
        with pytest_check.check:
            assert body["success"] is True
        with pytest_check.check:
            assert body["message"] == "User created successfully"
        with pytest_check.check:
            assert body["data"]["email"] == "ada@example.com"
        with pytest_check.check:
            assert body["data"]["is_active"] is True
        with pytest_check.check:
            assert isinstance(body["data"]["id"], int)
        with pytest_check.check:
            assert body["meta"]["request_id"] == response.headers["X-Request-ID"]

    async def test_password_never_returned(self, client: AsyncClient) -> None:
        """Neither the password nor its hash appears in the response."""
        response = await client.post(USERS_URL, json=VALID_PAYLOAD)

        data = response.json()["data"]
        assert "password" not in data
        assert "hashed_password" not in data
        assert "s3cretpass" not in response.text

    async def test_duplicate_email_conflict(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """Emails are unique regardless of case."""
        await create_user(email="ada@example.com")

        response = await client.post(USERS_URL, json=VALID_PAYLOAD)

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "CONFLICT"
        assert body["message"] == "A user with this email already exists"
        assert "errors" not in body

    async def test_field_validation_errors(self, client: AsyncClient) -> None:
        """Every failing field is reported and the input is not echoed."""
        payload = {
            "email": "not-an-email",
            "full_name": "",
            "password": "short",
            "password_confirm": "short",
        }

        response = await client.post(USERS_URL, json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "VALIDATION_ERROR"
        assert {"email", "full_name", "password"} <= set(_field_errors(body))
        assert {error["field"] for error in body["errors"]} >= {"email", "password"}
        assert "not-an-email" not in response.text

    async def test_password_mismatch_reported_on_body(
        self, client: AsyncClient
    ) -> None:
        """Cross-field failures are attributed to the whole body."""
        payload = {**VALID_PAYLOAD, "password_confirm": "different1"}

        response = await client.post(USERS_URL, json=payload)

        assert response.status_code == 422
        messages = _field_errors(response.json())["body"]
        assert any("Passwords do not match" in message for message in messages)

    async def test_unknown_field_rejected(self, client: AsyncClient) -> None:
        """Request schemas forbid fields they do not declare."""
        payload = {**VALID_PAYLOAD, "is_admin": True}

        response = await client.post(USERS_URL, json=payload)

        assert response.status_code == 422
        assert "is_admin" in _field_errors(response.json())

    async def test_missing_fields(self, client: AsyncClient) -> None:
        """Required fields are reported as missing."""
        response = await client.post(USERS_URL, json={})

        assert response.status_code == 422
        types = {error["type"] for error in response.json()["errors"]}
        assert types == {"missing"}


@pytest.mark.integration
class TestReadUsers:
    """GET /api/v1/users and /api/v1/users/{id}."""

    async def test_get_user(self, client: AsyncClient, create_user: CreateUser) -> None:
        """A single user is wrapped in the success envelope."""
        user = await create_user()

        response = await client.get(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == user
        assert body["message"] is None

    async def test_get_missing_user(self, client: AsyncClient) -> None:
        """Unknown IDs are a 404 error envelope."""
        response = await client.get(f"{USERS_URL}/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "NOT_FOUND"
        assert body["message"] == "User with ID 999 not found"

    async def test_non_integer_id(self, client: AsyncClient) -> None:
        """Path parameters are validated like bodies."""
        response = await client.get(f"{USERS_URL}/abc")

        assert response.status_code == 422
        assert "user_id" in _field_errors(response.json())

    async def test_pagination(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """Pages are ordered by ID and carry pagination metadata."""
        created = [await create_user() for _ in range(5)]

        response = await client.get(USERS_URL, params={"page": 2, "page_size": 2})

        assert response.status_code == 200
        body = response.json()
        assert [user["id"] for user in body["data"]] == [
            created[2]["id"],
            created[3]["id"],
        ]
        assert body["pagination"] == {
            "page": 2,
            "page_size": 2,
            "total_items": 5,
            "total_pages": 3,
            "has_next": True,
            "has_previous": True,
        }

    async def test_empty_list(self, client: AsyncClient) -> None:
        """An empty collection is an empty page, not an error."""
        response = await client.get(USERS_URL)

        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total_pages"] == 0
        assert body["pagination"]["page_size"] == 20

    @pytest.mark.parametrize(
        ("params", "field"),
        [
            ({"page": 0}, "page"),
            ({"page_size": 0}, "page_size"),
            ({"page_size": 101}, "page_size"),
        ],
    )
    async def test_invalid_pagination(
        self, client: AsyncClient, params: dict[str, int], field: str
    ) -> None:
        """Out-of-range paging parameters are validation errors."""
        response = await client.get(USERS_URL, params=params)

        assert response.status_code == 422
        assert field in _field_errors(response.json())


@pytest.mark.integration
class TestUpdateUser:
    """PATCH /api/v1/users/{id}."""

    async def test_partial_update(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """Only the sent fields change."""
        user = await create_user()

        response = await client.patch(
            f"{USERS_URL}/{user['id']}", json={"full_name": "Grace Hopper"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User updated successfully"
        assert body["data"]["full_name"] == "Grace Hopper"
        assert body["data"]["email"] == user["email"]

    async def test_empty_update(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """An empty body is rejected before touching the database."""
        user = await create_user()

        response = await client.patch(f"{USERS_URL}/{user['id']}", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["message"] == "No fields provided for update"

    async def test_null_for_required_field(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """Fields that cannot be cleared reject an explicit null."""
        user = await create_user()

        response = await client.patch(
            f"{USERS_URL}/{user['id']}", json={"full_name": None}
        )

        assert response.status_code == 422
        assert any(
            "Field cannot be null" in message
            for message in _field_errors(response.json())["full_name"]
        )

    async def test_email_conflict(
        self, client: AsyncClient, create_user: CreateUser
    ) -> None:
        """Taking another user's email is a conflict."""
        first = await create_user()
        second = await create_user()

        response = await client.patch(
            f"{USERS_URL}/{second['id']}", json={"email": first["email"]}
        )

        assert response.status_code == 409

    async def test_update_missing_user(self, client: AsyncClient) -> None:
        """Updating an unknown user is a 404."""
        response = await client.patch(f"{USERS_URL}/999", json={"full_name": "X"})

        assert response.status_code == 404


@pytest.mark.integration
class TestDeleteUser:
    """DELETE /api/v1/users/{id}."""

    async def test_delete(self, client: AsyncClient, create_user: CreateUser) -> None:
        """Deletion returns a confirmation and the user is gone."""
        user = await create_user()

        response = await client.delete(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == {
            "id": user["id"],
            "deleted": True,
            "message": "User deleted successfully",
        }
        follow_up = await client.get(f"{USERS_URL}/{user['id']}")
        assert follow_up.status_code == 404

    async def test_delete_cascades_to_items(
        self,
        client: AsyncClient,
        create_user: CreateUser,
        create_item: CreateItem,
    ) -> None:
        """A user's items are removed along with the user."""
        user = await create_user()
        item = await create_item(user["id"])

        await client.delete(f"{USERS_URL}/{user['id']}")

        response = await client.get(f"/api/v1/items/{item['id']}")
        assert response.status_code == 404

    async def test_delete_missing_user(self, client: AsyncClient) -> None:
        """Deleting an unknown user is a 404."""
        response = await client.delete(f"{USERS_URL}/999")

        assert response.status_code == 404


@pytest.mark.integration
class TestUserItems:
    """GET /api/v1/users/{id}/items."""

    async def test_lists_only_own_items(
        self,
        client: AsyncClient,
        create_user: CreateUser,
        create_item: CreateItem,
    ) -> None:
        """Only the user's items are listed."""
        owner = await create_user()
        other = await create_user()
        mine = await create_item(owner["id"])
        await create_item(other["id"])

        response = await client.get(f"{USERS_URL}/{owner['id']}/items")

        body = response.json()
        assert [item["id"] for item in body["data"]] == [mine["id"]]
        assert body["pagination"]["total_items"] == 1

    async def test_missing_user(self, client: AsyncClient) -> None:
        """Listing items of an unknown user is a 404."""
        response = await client.get(f"{USERS_URL}/999/items")

        assert response.status_code == 404
