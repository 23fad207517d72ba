"""Unit tests for permission registry use cases

Tests cover:
- Field rules (blank, length) and uniqueness of name and (resource, action)
- Uniqueness on update excludes the permission itself
- Role set replacement, clearing, and leaving roles untouched
- Delete and lookup of missing permissions
"""

import logging
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from src.app.errors import NotFoundError, ValidationError
from src.app.use_cases.permissions import (
    CreatePermission,
    UpdatePermission,
    DeletePermission,
    GetPermission,
    ListPermissions,
    PermissionCommandDTO,
    PermissionFilterDTO,
)
from src.domain.permission import Permission
from src.domain.role import Role


def make_role(role_id, name=None):
    return Role(id=role_id, name=name or f"role-{role_id}")


def make_permission(permission_id=1, roles=None, **overrides):
    values = dict(
        id=permission_id,
        name="Read Users",
        resource="users",
        action="read",
        is_active=True,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )
    values.update(overrides)
    permission = Permission(**values)
    permission.roles = roles or []
    return permission


async def assign_id(permission):
    permission.id = permission.id or 1
    permission.created_at = permission.created_at or datetime.now(timezone.utc)
    permission.updated_at = permission.updated_at or datetime.now(timezone.utc)
    return permission


@pytest.fixture
def mock_permission_repo():
    repo = MagicMock()
    repo.exists_by_name = AsyncMock(return_value=False)
    repo.exists_by_resource_and_action = AsyncMock(return_value=False)
    repo.create = AsyncMock(side_effect=assign_id)
    repo.update = AsyncMock(side_effect=assign_id)
    return repo


@pytest.fixture
def mock_role_repo():
    repo = MagicMock()
    repo.get_all_by_ids = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def create_use_case(mock_uow, mock_permission_repo, mock_role_repo):
    return CreatePermission(mock_uow, mock_permission_repo, mock_role_repo)


@pytest.fixture
def update_use_case(mock_uow, mock_permission_repo, mock_role_repo):
    return UpdatePermission(mock_uow, mock_permission_repo, mock_role_repo)


def command(**overrides):
    values = dict(name="Read Users", resource="users", action="read")
    values.update(overrides)
    return PermissionCommandDTO(**values)


@pytest.mark.asyncio
class TestCreatePermission:
    async def test_create_success(self, create_use_case, mock_permission_repo, mock_uow):
        result = await create_use_case.execute(command(description="List users"))

        assert result.is_ok()
        response = result.value
        assert response.full_permission == "users:read"
        assert response.role_ids == []
        mock_permission_repo.create.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.parametrize(
        "overrides, code",
        [
            ({"name": None}, "PERMISSION_NAME_REQUIRED"),
            ({"name": "   "}, "PERMISSION_NAME_REQUIRED"),
            ({"resource": ""}, "PERMISSION_RESOURCE_REQUIRED"),
            ({"action": None}, "PERMISSION_ACTION_REQUIRED"),
            ({"name": "n" * 101}, "PERMISSION_NAME_TOO_LONG"),
            ({"resource": "r" * 101}, "PERMISSION_RESOURCE_TOO_LONG"),
            ({"action": "a" * 51}, "PERMISSION_ACTION_TOO_LONG"),
        ],
    )
    async def test_field_rules(self, create_use_case, mock_permission_repo, mock_uow, overrides, code):
        result = await create_use_case.execute(command(**overrides))

        assert result.is_err()
        assert isinstance(result.error, ValidationError)
        assert result.error.code == code
        mock_permission_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_length_limits_are_inclusive(self, create_use_case):
        result = await create_use_case.execute(
            command(name="n" * 100, resource="r" * 100, action="a" * 50)
        )

        assert result.is_ok()

    async def test_duplicate_name(self, create_use_case, mock_permission_repo):
        mock_permission_repo.exists_by_name = AsyncMock(return_value=True)

        result = await create_use_case.execute(command())

        assert result.error.code == "PERMISSION_NAME_EXISTS"
        mock_permission_repo.create.assert_not_called()

    async def test_duplicate_resource_action(self, create_use_case, mock_permission_repo):
        mock_permission_repo.exists_by_resource_and_action = AsyncMock(return_value=True)

        result = await create_use_case.execute(command(name="Read Users Again"))

        assert result.error.code == "PERMISSION_RESOURCE_ACTION_EXISTS"
        mock_permission_repo.exists_by_resource_and_action.assert_awaited_once_with(
            "users", "read", exclude_id=None
        )

    async def test_unknown_role_ids_are_dropped_and_logged(
        self, create_use_case, mock_role_repo, caplog
    ):
        mock_role_repo.get_all_by_ids = AsyncMock(return_value=[make_role(1, "admin")])

        with caplog.at_level(logging.WARNING):
            result = await create_use_case.execute(command(role_ids=[1, 99]))

        assert result.value.role_ids == [1]
        assert result.value.role_names == ["admin"]
        assert "99" in caplog.text

    async def test_store_failure_is_not_masked(self, create_use_case, mock_permission_repo, mock_uow):
        mock_permission_repo.create = AsyncMock(side_effect=RuntimeError("disk full"))

        with pytest.raises(RuntimeError):
            await create_use_case.execute(command())

        mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
class TestUpdatePermission:
    async def test_update_missing(self, update_use_case, mock_permission_repo):
        mock_permission_repo.get_by_id = AsyncMock(return_value=None)

        result = await update_use_case.execute(7, command())

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == "PERMISSION_NOT_FOUND"
        mock_permission_repo.update.assert_not_called()

    async def test_saving_unchanged_permission_succeeds(self, update_use_case, mock_permission_repo):
        mock_permission_repo.get_by_id = AsyncMock(return_value=make_permission(permission_id=3))

        result = await update_use_case.execute(3, command())

        assert result.is_ok()
        mock_permission_repo.exists_by_name.assert_awaited_once_with("Read Users", exclude_id=3)
        mock_permission_repo.exists_by_resource_and_action.assert_awaited_once_with(
            "users", "read", exclude_id=3
        )

    async def test_update_conflicting_with_other_permission(self, update_use_case, mock_permission_repo):
        mock_permission_repo.get_by_id = AsyncMock(return_value=make_permission(permission_id=3))
        mock_permission_repo.exists_by_name = AsyncMock(return_value=True)

        result = await update_use_case.execute(3, command(name="Write Users"))

        assert result.error.code == "PERMISSION_NAME_EXISTS"
        mock_permission_repo.update.assert_not_called()

    async def test_role_set_is_replaced(self, update_use_case, mock_permission_repo, mock_role_repo):
        permission = make_permission(roles=[make_role(1), make_role(2)])
        mock_permission_repo.get_by_id = AsyncMock(return_value=permission)
        mock_role_repo.get_all_by_ids = AsyncMock(return_value=[make_role(2), make_role(3)])

        result = await update_use_case.execute(1, command(role_ids=[2, 3]))

        assert result.value.role_ids == [2, 3]
        assert sorted(role.id for role in permission.roles) == [2, 3]

    async def test_empty_role_list_clears_roles(self, update_use_case, mock_permission_repo, mock_role_repo):
        permission = make_permission(roles=[make_role(1)])
        mock_permission_repo.get_by_id = AsyncMock(return_value=permission)

        result = await update_use_case.execute(1, command(role_ids=[]))

        assert result.value.role_ids == []
        assert result.value.role_count == 0

    async def test_absent_role_list_keeps_roles(self, update_use_case, mock_permission_repo, mock_role_repo):
        permission = make_permission(roles=[make_role(1)])
        mock_permission_repo.get_by_id = AsyncMock(return_value=permission)

        result = await update_use_case.execute(1, command(description="changed"))

        assert result.value.role_ids == [1]
        assert result.value.description == "changed"
        mock_role_repo.get_all_by_ids.assert_not_called()


@pytest.mark.asyncio
class TestDeleteAndQueryPermissions:
    async def test_delete_missing_does_not_mutate(self, mock_uow, mock_permission_repo):
        mock_permission_repo.exists_by_id = AsyncMock(return_value=False)
        mock_permission_repo.delete_by_id = AsyncMock()

        result = await DeletePermission(mock_uow, mock_permission_repo).execute(5)

        assert result.error.code == "PERMISSION_NOT_FOUND"
        mock_permission_repo.delete_by_id.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_delete_existing(self, mock_uow, mock_permission_repo):
        mock_permission_repo.exists_by_id = AsyncMock(return_value=True)
        mock_permission_repo.delete_by_id = AsyncMock()

        result = await DeletePermission(mock_uow, mock_permission_repo).execute(5)

        assert result.is_ok()
        mock_permission_repo.delete_by_id.assert_awaited_once_with(5)

    async def test_get_by_resource_and_action(self, mock_permission_repo):
        mock_permission_repo.get_by_resource_and_action = AsyncMock(return_value=make_permission())

        result = await GetPermission(mock_permission_repo).by_resource_and_action("users", "read")

        assert result.value.name == "Read Users"

    async def test_get_by_name_missing(self, mock_permission_repo):
        mock_permission_repo.get_by_name = AsyncMock(return_value=None)

        result = await GetPermission(mock_permission_repo).by_name("Nope")

        assert isinstance(result.error, NotFoundError)

    async def test_list_forwards_filters(self, mock_permission_repo):
        mock_permission_repo.list_permissions = AsyncMock(return_value=[make_permission()])

        result = await ListPermissions(mock_permission_repo).execute(
            PermissionFilterDTO(active_only=True, resource="users")
        )

        assert len(result.value) == 1
        mock_permission_repo.list_permissions.assert_awaited_once_with(
            active_only=True, role_id=None, resource="users", action=None, name_contains=None
        )

    async def test_count_active(self, mock_permission_repo):
        mock_permission_repo.count_active = AsyncMock(return_value=4)

        result = await ListPermissions(mock_permission_repo).count_active()

        assert result.value == 4
