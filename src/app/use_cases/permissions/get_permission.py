"""GetPermission Use Case

Single-permission lookups by id, exact name, or (resource, action).
"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.repositories.permission_repository import PermissionRepository
from .dtos import PermissionResponseDTO


class GetPermission:
    def __init__(self, permission_repo: PermissionRepository):
        self.permission_repo = permission_repo

    async def execute(self, permission_id: int) -> Result[PermissionResponseDTO]:
        permission = await self.permission_repo.get_by_id(permission_id)
        if not permission:
            return Return.err(
                NotFoundError(
                    code="PERMISSION_NOT_FOUND",
                    message=f"Permission with ID {permission_id} not found",
                )
            )
        return Return.ok(PermissionResponseDTO.from_entity(permission))

    async def by_name(self, name: str) -> Result[PermissionResponseDTO]:
        permission = await self.permission_repo.get_by_name(name)
        if not permission:
            return Return.err(
                NotFoundError(
                    code="PERMISSION_NOT_FOUND",
                    message=f"Permission named '{name}' not found",
                )
            )
        return Return.ok(PermissionResponseDTO.from_entity(permission))

    async def by_resource_and_action(self, resource: str, action: str) -> Result[PermissionResponseDTO]:
        permission = await self.permission_repo.get_by_resource_and_action(resource, action)
        if not permission:
            return Return.err(
                NotFoundError(
                    code="PERMISSION_NOT_FOUND",
                    message=f"Permission for resource '{resource}' and action '{action}' not found",
                )
            )
        return Return.ok(PermissionResponseDTO.from_entity(permission))
