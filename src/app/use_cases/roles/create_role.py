"""CreateRole Use Case"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository
from src.app.repositories.role_repository import RoleRepository
from src.app.use_cases.associations import report_unknown_ids
from src.domain.role import Role
from .dtos import RoleCommandDTO, RoleResponseDTO
from .validation import validate_role


class CreateRole:
    """
    Use Case: Create role

    Business Rules:
    1. name is required, at most 100 characters, and unique
    2. Permission ids are resolved against the registry; unknown ids are dropped
    """

    def __init__(
        self,
        uow: UnitOfWork,
        role_repo: RoleRepository,
        permission_repo: PermissionRepository,
    ):
        self.uow = uow
        self.role_repo = role_repo
        self.permission_repo = permission_repo

    async def execute(self, command: RoleCommandDTO) -> Result[RoleResponseDTO]:
        try:
            error = await validate_role(self.role_repo, command)
            if error:
                return Return.err(error)

            role = Role(
                name=command.name,
                description=command.description,
                is_active=command.is_active,
            )

            if command.permission_ids:
                permissions = await self.permission_repo.get_all_by_ids(command.permission_ids)
                report_unknown_ids(command.permission_ids, permissions, "permission")
                role.permissions = permissions

            created_role = await self.role_repo.create(role)
            await self.uow.commit()

            return Return.ok(RoleResponseDTO.from_entity(created_role))

        except Exception:
            await self.uow.rollback()
            raise
