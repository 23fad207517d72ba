"""UpdatePermission Use Case

Replaces the scalar fields of a permission and, when a role id list is
given, replaces its role set wholesale.
"""

import logging
from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository
from src.app.repositories.role_repository import RoleRepository
from src.app.use_cases.associations import report_unknown_ids
from src.domain.association import diff_association, apply_association
from .dtos import PermissionCommandDTO, PermissionResponseDTO
from .validation import validate_permission

logger = logging.getLogger(__name__)


class UpdatePermission:
    """
    Use Case: Update permission

    Business Rules:
    1. The permission must exist
    2. Same field rules as creation
    3. Uniqueness is checked against every other permission (self excluded)
    4. role_ids given: roles not listed are removed, listed roles are added
       (an empty list clears all roles); role_ids None: roles untouched
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

    async def execute(self, permission_id: int, command: PermissionCommandDTO) -> Result[PermissionResponseDTO]:
        try:
            permission = await self.permission_repo.get_by_id(permission_id)
            if not permission:
                return Return.err(
                    NotFoundError(
                        code="PERMISSION_NOT_FOUND",
                        message=f"Permission with ID {permission_id} not found",
                    )
                )

            error = await validate_permission(self.permission_repo, command, exclude_id=permission_id)
            if error:
                return Return.err(error)

            permission.name = command.name
            permission.description = command.description
            permission.resource = command.resource
            permission.action = command.action
            permission.is_active = command.is_active

            if command.role_ids is not None:
                roles = await self.role_repo.get_all_by_ids(command.role_ids)
                report_unknown_ids(command.role_ids, roles, "role")

                change = diff_association(
                    (role.id for role in permission.roles),
                    (role.id for role in roles),
                )
                if not change.is_empty:
                    logger.info(
                        f"Permission {permission_id} roles: "
                        f"added={sorted(change.added)} removed={sorted(change.removed)}"
                    )
                permission.roles = apply_association(list(permission.roles), roles, change)

            updated_permission = await self.permission_repo.update(permission)
            await self.uow.commit()

            return Return.ok(PermissionResponseDTO.from_entity(updated_permission))

        except Exception:
            await self.uow.rollback()
            raise
