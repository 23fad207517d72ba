"""CreatePermission Use Case

Registers a new (resource, action) permission, optionally linked to roles.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository
from src.app.repositories.role_repository import RoleRepository
from src.app.use_cases.associations import report_unknown_ids
from src.domain.permission import Permission
from .dtos import PermissionCommandDTO, PermissionResponseDTO
from .validation import validate_permission


class CreatePermission:
    """
    Use Case: Create permission

    Business Rules:
    1. name, resource and action are required (max 100/100/50 chars)
    2. name is unique
    3. (resource, action) is unique
    4. Role ids are resolved against the role store; unknown ids are dropped

    The unique constraints on the permissions table back rules 2 and 3 when
    two creations race past the checks.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        permission_repo: PermissionRepository,
        role_repo: RoleRepository,
    ):
        self.uow = uow
        self.permission_repo = permission_repo
        self.role_repo = role_repo

    async def execute(self, command: PermissionCommandDTO) -> Result[PermissionResponseDTO]:
        """
        Execute permission creation

        Args:
            command: PermissionCommandDTO

        Returns:
            Result[PermissionResponseDTO]: Created permission or ValidationError
        """
        try:
            error = await validate_permission(self.permission_repo, command)
            if error:
                return Return.err(error)

            permission = Permission(
                name=command.name,
                description=command.description,
                resource=command.resource,
                action=command.action,
                is_active=command.is_active,
            )

            if command.role_ids:
                roles = await self.role_repo.get_all_by_ids(command.role_ids)
                report_unknown_ids(command.role_ids, roles, "role")
                permission.roles = roles

            created_permission = await self.permission_repo.create(permission)
            await self.uow.commit()

            return Return.ok(PermissionResponseDTO.from_entity(created_permission))

        except Exception:
            await self.uow.rollback()
            raise
