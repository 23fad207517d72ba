"""ListPermissions Use Case

Read-only permission queries: filtered listing, distinct active resources
and actions, and the active permission count.
"""

from typing import List
from src.libs.result import Result, Return
from src.app.repositories.permission_repository import PermissionRepository
from .dtos import PermissionFilterDTO, PermissionResponseDTO


class ListPermissions:
    def __init__(self, permission_repo: PermissionRepository):
        self.permission_repo = permission_repo

    async def execute(self, filters: PermissionFilterDTO) -> Result[List[PermissionResponseDTO]]:
        permissions = await self.permission_repo.list_permissions(**filters.model_dump())
        return Return.ok([PermissionResponseDTO.from_entity(p) for p in permissions])

    async def active_resources(self) -> Result[List[str]]:
        return Return.ok(await self.permission_repo.list_active_resources())

    async def active_actions(self) -> Result[List[str]]:
        return Return.ok(await self.permission_repo.list_active_actions())

    async def count_active(self) -> Result[int]:
        return Return.ok(await self.permission_repo.count_active())
