"""Role API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.permission_request import RoleRequestSchema
from src.app.use_cases.roles import (
    CreateRole,
    UpdateRole,
    DeleteRole,
    GetRole,
    ListRoles,
    AddPermissionToRole,
    RemovePermissionFromRole,
    RoleCommandDTO,
    RoleResponseDTO,
)
from src.adapter.repositories.permission_repository import SqlAlchemyPermissionRepository
from src.adapter.repositories.role_repository import SqlAlchemyRoleRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/roles", tags=["Roles"])


def _to_command(request: RoleRequestSchema) -> RoleCommandDTO:
    return RoleCommandDTO(
        name=request.name,
        description=request.description,
        is_active=request.is_active,
        permission_ids=request.permission_ids,
    )


@router.get("", response_model=List[RoleResponseDTO])
async def list_roles(session: AsyncSession = Depends(get_session)):
    result = await ListRoles(SqlAlchemyRoleRepository(session)).execute()
    return result.value


@router.get("/active", response_model=List[RoleResponseDTO])
async def list_active_roles(session: AsyncSession = Depends(get_session)):
    result = await ListRoles(SqlAlchemyRoleRepository(session)).execute(active_only=True)
    return result.value


@router.get("/permission/{permission_id}", response_model=List[RoleResponseDTO])
async def list_roles_by_permission(permission_id: int, session: AsyncSession = Depends(get_session)):
    result = await ListRoles(SqlAlchemyRoleRepository(session)).by_permission(permission_id)
    return result.value


@router.get("/user/{user_id}", response_model=List[RoleResponseDTO])
async def list_roles_by_user(user_id: int, session: AsyncSession = Depends(get_session)):
    result = await ListRoles(SqlAlchemyRoleRepository(session)).by_user(user_id)
    return result.value


@router.get("/search", response_model=List[RoleResponseDTO])
async def search_roles(name: str, session: AsyncSession = Depends(get_session)):
    """Active roles whose name contains `name`."""
    result = await ListRoles(SqlAlchemyRoleRepository(session)).search(name)
    return result.value


@router.get("/name/{name}", response_model=RoleResponseDTO)
async def get_role_by_name(name: str, session: AsyncSession = Depends(get_session)):
    result = await GetRole(SqlAlchemyRoleRepository(session)).by_name(name)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/stats/count/active", response_model=int)
async def count_active_roles(session: AsyncSession = Depends(get_session)):
    result = await ListRoles(SqlAlchemyRoleRepository(session)).count_active()
    return result.value


@router.post("", response_model=RoleResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_role(request: RoleRequestSchema, session: AsyncSession = Depends(get_session)):
    """
    Create a role, optionally granting it permissions.

    **Returns:**
    - 201: Role created
    - 400: Name blank, too long or taken
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateRole(uow, SqlAlchemyRoleRepository(session), SqlAlchemyPermissionRepository(session))
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{role_id}", response_model=RoleResponseDTO)
async def get_role(role_id: int, session: AsyncSession = Depends(get_session)):
    result = await GetRole(SqlAlchemyRoleRepository(session)).execute(role_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{role_id}", response_model=RoleResponseDTO)
async def update_role(
    role_id: int,
    request: RoleRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update a role. When `permission_ids` is present the permission set is
    replaced with exactly those permissions (`[]` clears it).
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateRole(uow, SqlAlchemyRoleRepository(session), SqlAlchemyPermissionRepository(session))
    result = await use_case.execute(role_id, _to_command(request))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(role_id: int, session: AsyncSession = Depends(get_session)):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteRole(uow, SqlAlchemyRoleRepository(session)).execute(role_id)
    if result.is_err():
        raise ClientError(result.error)


@router.post("/{role_id}/permissions/{permission_id}", response_model=RoleResponseDTO)
async def add_permission_to_role(
    role_id: int,
    permission_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Grant one permission to a role.

    **Returns:**
    - 200: Role with its updated permissions
    - 404: Role or permission not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = AddPermissionToRole(uow, SqlAlchemyRoleRepository(session), SqlAlchemyPermissionRepository(session))
    result = await use_case.execute(role_id, permission_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{role_id}/permissions/{permission_id}", response_model=RoleResponseDTO)
async def remove_permission_from_role(
    role_id: int,
    permission_id: int,
    session: AsyncSession = Depends(get_session)
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RemovePermissionFromRole(uow, SqlAlchemyRoleRepository(session), SqlAlchemyPermissionRepository(session))
    result = await use_case.execute(role_id, permission_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
