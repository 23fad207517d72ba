"""UpdateRole Use Case"""

import logging
from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository
from src.app.repositories.role_repository import RoleRepository
from src.app.use_cases.associations import report_unknown_ids
from src.domain.association import diff_association, apply_association
from .dtos import RoleCommandDTO, RoleResponseDTO
from .validation import validate_role

logger = logging.getLogger(__name__)


class UpdateRole:
    """
    Use Case: Update role

    Business Rules:
    1. The role must exist
    2. name is required, at most 100 characters, unique among other roles
    3. permission_ids given: the permission set is replaced wholesale
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

    async def execute(self, role_id: int, command: RoleCommandDTO) -> Result[RoleResponseDTO]:
        try:
            role = await self.role_repo.get_by_id(role_id)
            if not role:
                return Return.err(
                    NotFoundError(code="ROLE_NOT_FOUND", message=f"Role with ID {role_id} not found")
                )

            error = await validate_role(self.role_repo, command, exclude_id=role_id)
            if error:
                return Return.err(error)

            role.name = command.name
            role.description = command.description
            role.is_active = command.is_active

            if command.permission_ids is not None:
                permissions = await self.permission_repo.get_all_by_ids(command.permission_ids)
                report_unknown_ids(command.permission_ids, permissions, "permission")

                change = diff_association(
                    (permission.id for permission in role.permissions),
                    (permission.id for permission in permissions),
                )
                if not change.is_empty:
                    logger.info(
                        f"Role {role_id} permissions: "
                        f"added={sorted(change.added)} removed={sorted(change.removed)}"
                    )
                role.permissions = apply_association(list(role.permissions), permissions, change)

            updated_role = await self.role_repo.update(role)
            await self.uow.commit()

            return Return.ok(RoleResponseDTO.from_entity(updated_role))

        except Exception:
            await self.uow.rollback()
            raise
