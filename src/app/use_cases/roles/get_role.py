"""GetRole and ListRoles Use Cases"""

from typing import List
from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.repositories.role_repository import RoleRepository
from .dtos import RoleResponseDTO


class GetRole:
    def __init__(self, role_repo: RoleRepository):
        self.role_repo = role_repo

    async def execute(self, role_id: int) -> Result[RoleResponseDTO]:
        role = await self.role_repo.get_by_id(role_id)
        if not role:
            return Return.err(
                NotFoundError(code="ROLE_NOT_FOUND", message=f"Role with ID {role_id} not found")
            )
        return Return.ok(RoleResponseDTO.from_entity(role))

    async def by_name(self, name: str) -> Result[RoleResponseDTO]:
        role = await self.role_repo.get_by_name(name)
        if not role:
            return Return.err(
                NotFoundError(code="ROLE_NOT_FOUND", message=f"Role named '{name}' not found")
            )
        return Return.ok(RoleResponseDTO.from_entity(role))


class ListRoles:
    """
    Role listings

    Unknown permission or user ids yield an empty list, not an error.
    """

    def __init__(self, role_repo: RoleRepository):
        self.role_repo = role_repo

    async def execute(self, active_only: bool = False) -> Result[List[RoleResponseDTO]]:
        roles = await self.role_repo.list_roles(active_only=active_only)
        return Return.ok(self._to_dtos(roles))

    async def by_permission(self, permission_id: int) -> Result[List[RoleResponseDTO]]:
        roles = await self.role_repo.list_roles(permission_id=permission_id)
        return Return.ok(self._to_dtos(roles))

    async def by_user(self, user_id: int) -> Result[List[RoleResponseDTO]]:
        roles = await self.role_repo.list_roles(user_id=user_id)
        return Return.ok(self._to_dtos(roles))

    async def search(self, name: str) -> Result[List[RoleResponseDTO]]:
        """Active roles whose name contains the given text"""
        roles = await self.role_repo.list_roles(active_only=True, name_contains=name)
        return Return.ok(self._to_dtos(roles))

    async def count_active(self) -> Result[int]:
        return Return.ok(await self.role_repo.count_active())

    @staticmethod
    def _to_dtos(roles) -> List[RoleResponseDTO]:
        return [RoleResponseDTO.from_entity(role) for role in roles]
