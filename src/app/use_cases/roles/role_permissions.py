"""AddPermissionToRole and RemovePermissionFromRole Use Cases"""

import logging
from typing import Optional, Tuple
from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository
from src.app.repositories.role_repository import RoleRepository
from src.domain.permission import Permission
from src.domain.role import Role
from .dtos import RoleResponseDTO

logger = logging.getLogger(__name__)


class _RolePermissionChange:
    def __init__(
        self,
        uow: UnitOfWork,
        role_repo: RoleRepository,
        permission_repo: PermissionRepository,
    ):
        self.uow = uow
        self.role_repo = role_repo
        self.permission_repo = permission_repo

    async def _load(
        self, role_id: int, permission_id: int
    ) -> Tuple[Optional[Role], Optional[Permission], Optional[NotFoundError]]:
        role = await self.role_repo.get_by_id(role_id)
        if not role:
            return None, None, NotFoundError(
                code="ROLE_NOT_FOUND", message=f"Role with ID {role_id} not found"
            )

        permission = await self.permission_repo.get_by_id(permission_id)
        if not permission:
            return role, None, NotFoundError(
                code="PERMISSION_NOT_FOUND",
                message=f"Permission with ID {permission_id} not found",
            )

        return role, permission, None

    async def _save(self, role: Role) -> RoleResponseDTO:
        updated_role = await self.role_repo.update(role)
        await self.uow.commit()
        return RoleResponseDTO.from_entity(updated_role)


class AddPermissionToRole(_RolePermissionChange):
    """
    Use Case: Grant one permission to a role

    Business Rules:
    1. Both the role and the permission must exist
    2. Granting a permission the role already has changes nothing
    """

    async def execute(self, role_id: int, permission_id: int) -> Result[RoleResponseDTO]:
        try:
            role, permission, error = await self._load(role_id, permission_id)
            if error:
                return Return.err(error)

            if any(current.id == permission.id for current in role.permissions):
                return Return.ok(RoleResponseDTO.from_entity(role))

            role.permissions = [*role.permissions, permission]
            logger.info(f"Role {role_id} permissions: added=[{permission_id}]")
            return Return.ok(await self._save(role))

        except Exception:
            await self.uow.rollback()
            raise


class RemovePermissionFromRole(_RolePermissionChange):
    """
    Use Case: Revoke one permission from a role

    Business Rules:
    1. Both the role and the permission must exist
    2. Revoking a permission the role does not have changes nothing
    """

    async def execute(self, role_id: int, permission_id: int) -> Result[RoleResponseDTO]:
        try:
            role, permission, error = await self._load(role_id, permission_id)
            if error:
                return Return.err(error)

            remaining = [current for current in role.permissions if current.id != permission.id]
            if len(remaining) == len(role.permissions):
                return Return.ok(RoleResponseDTO.from_entity(role))

            role.permissions = remaining
            logger.info(f"Role {role_id} permissions: removed=[{permission_id}]")
            return Return.ok(await self._save(role))

        except Exception:
            await self.uow.rollback()
            raise
