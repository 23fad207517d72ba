"""Permission field and uniqueness validation

Shared by create and update. On update the record being updated is
excluded from the uniqueness checks so that saving a permission unchanged
succeeds.
"""

from typing import Optional
from src.app.errors import ValidationError
from src.app.repositories.permission_repository import PermissionRepository
from src.domain.permission import NAME_MAX_LENGTH, RESOURCE_MAX_LENGTH, ACTION_MAX_LENGTH
from .dtos import PermissionCommandDTO


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_fields(command: PermissionCommandDTO) -> Optional[ValidationError]:
    """Return the first field rule violated by the command, if any"""
    if _is_blank(command.name):
        return ValidationError(code="PERMISSION_NAME_REQUIRED", message="Permission name is required")
    if _is_blank(command.resource):
        return ValidationError(code="PERMISSION_RESOURCE_REQUIRED", message="Resource is required")
    if _is_blank(command.action):
        return ValidationError(code="PERMISSION_ACTION_REQUIRED", message="Action is required")
    if len(command.name) > NAME_MAX_LENGTH:
        return ValidationError(
            code="PERMISSION_NAME_TOO_LONG",
            message=f"Permission name cannot exceed {NAME_MAX_LENGTH} characters",
        )
    if len(command.resource) > RESOURCE_MAX_LENGTH:
        return ValidationError(
            code="PERMISSION_RESOURCE_TOO_LONG",
            message=f"Resource cannot exceed {RESOURCE_MAX_LENGTH} characters",
        )
    if len(command.action) > ACTION_MAX_LENGTH:
        return ValidationError(
            code="PERMISSION_ACTION_TOO_LONG",
            message=f"Action cannot exceed {ACTION_MAX_LENGTH} characters",
        )
    return None


async def check_uniqueness(
    permission_repo: PermissionRepository,
    command: PermissionCommandDTO,
    exclude_id: Optional[int] = None,
) -> Optional[ValidationError]:
    """Return a ValidationError when name or (resource, action) is taken"""
    if await permission_repo.exists_by_name(command.name, exclude_id=exclude_id):
        return ValidationError(
            code="PERMISSION_NAME_EXISTS",
            message=f"A permission named '{command.name}' already exists",
        )
    if await permission_repo.exists_by_resource_and_action(
        command.resource, command.action, exclude_id=exclude_id
    ):
        return ValidationError(
            code="PERMISSION_RESOURCE_ACTION_EXISTS",
            message=f"A permission for resource '{command.resource}' "
                    f"and action '{command.action}' already exists",
        )
    return None


async def validate_permission(
    permission_repo: PermissionRepository,
    command: PermissionCommandDTO,
    exclude_id: Optional[int] = None,
) -> Optional[ValidationError]:
    return check_fields(command) or await check_uniqueness(permission_repo, command, exclude_id)
