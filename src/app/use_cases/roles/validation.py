"""Role name validation shared by create and update"""

from typing import Optional
from src.app.errors import ValidationError
from src.app.repositories.role_repository import RoleRepository
from src.domain.role import ROLE_NAME_MAX_LENGTH
from .dtos import RoleCommandDTO


async def validate_role(
    role_repo: RoleRepository,
    command: RoleCommandDTO,
    exclude_id: Optional[int] = None,
) -> Optional[ValidationError]:
    if command.name is None or not command.name.strip():
        return ValidationError(code="ROLE_NAME_REQUIRED", message="Role name is required")
    if len(command.name) > ROLE_NAME_MAX_LENGTH:
        return ValidationError(
            code="ROLE_NAME_TOO_LONG",
            message=f"Role name cannot exceed {ROLE_NAME_MAX_LENGTH} characters",
        )
    if await role_repo.exists_by_name(command.name, exclude_id=exclude_id):
        return ValidationError(
            code="ROLE_NAME_EXISTS",
            message=f"A role named '{command.name}' already exists",
        )
    return None
