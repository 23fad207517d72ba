"""Permission API Routes

Permission registry: CRUD with uniqueness rules, role-set replacement, and
the lookup and catalog endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.permission_request import PermissionRequestSchema
from src.app.use_cases.permissions import (
    CreatePermission,
    UpdatePermission,
    DeletePermission,
    GetPermission,
    ListPermissions,
    PermissionCommandDTO,
    PermissionResponseDTO,
    PermissionFilterDTO,
)
from src.adapter.repositories.permission_repository import SqlAlchemyPermissionRepository
from src.adapter.repositories.role_repository import SqlAlchemyRoleRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/permissions", tags=["Permissions"])

VALIDATION_RESPONSES = {
    400: {
        "description": "Field rule or uniqueness violated",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "PERMISSION_RESOURCE_ACTION_EXISTS",
                        "message": "A permission for resource 'users' and action 'read' already exists"
                    }
                }
            }
        }
    },
    404: {
        "description": "Permission not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "PERMISSION_NOT_FOUND",
                        "message": "Permission with ID 123 not found"
                    }
                }
            }
        }
    }
}


def _to_command(request: PermissionRequestSchema) -> PermissionCommandDTO:
    return PermissionCommandDTO(
        name=request.name,
        description=request.description,
        resource=request.resource,
        action=request.action,
        is_active=request.is_active,
        role_ids=request.role_ids,
    )


async def _list(session: AsyncSession, filters: PermissionFilterDTO) -> List[PermissionResponseDTO]:
    result = await ListPermissions(SqlAlchemyPermissionRepository(session)).execute(filters)
    return result.value


def _unwrap(result):
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("", response_model=List[PermissionResponseDTO])
async def list_permissions(session: AsyncSession = Depends(get_session)):
    return await _list(session, PermissionFilterDTO())


@router.post(
    "",
    response_model=PermissionResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSES,
)
async def create_permission(
    request: PermissionRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a permission.

    **Rules:**
    - `name`, `resource` and `action` are required (max 100/100/50 chars)
    - `name` is unique, and so is the (`resource`, `action`) pair
    - unknown ids in `role_ids` are ignored

    **Returns:**
    - 201: Permission created
    - 400: Field rule or uniqueness violated
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreatePermission(
        uow,
        SqlAlchemyPermissionRepository(session),
        SqlAlchemyRoleRepository(session),
    )
    return _unwrap(await use_case.execute(_to_command(request)))


@router.get("/active", response_model=List[PermissionResponseDTO])
async def list_active_permissions(session: AsyncSession = Depends(get_session)):
    return await _list(session, PermissionFilterDTO(active_only=True))


@router.get("/role/{role_id}", response_model=List[PermissionResponseDTO])
async def list_permissions_by_role(role_id: int, session: AsyncSession = Depends(get_session)):
    """Active permissions granted by a role."""
    return await _list(session, PermissionFilterDTO(active_only=True, role_id=role_id))


@router.get("/resource/{resource}/action/{action}", response_model=PermissionResponseDTO,
            responses=VALIDATION_RESPONSES)
async def get_permission_by_resource_and_action(
    resource: str,
    action: str,
    session: AsyncSession = Depends(get_session)
):
    use_case = GetPermission(SqlAlchemyPermissionRepository(session))
    return _unwrap(await use_case.by_resource_and_action(resource, action))


@router.get("/resource/{resource}", response_model=List[PermissionResponseDTO])
async def list_permissions_by_resource(resource: str, session: AsyncSession = Depends(get_session)):
    return await _list(session, PermissionFilterDTO(active_only=True, resource=resource))


@router.get("/action/{action}", response_model=List[PermissionResponseDTO])
async def list_permissions_by_action(action: str, session: AsyncSession = Depends(get_session)):
    return await _list(session, PermissionFilterDTO(active_only=True, action=action))


@router.get("/search", response_model=List[PermissionResponseDTO])
async def search_permissions(name: str, session: AsyncSession = Depends(get_session)):
    """Active permissions whose name contains the given text."""
    return await _list(session, PermissionFilterDTO(active_only=True, name_contains=name))


@router.get("/name/{name}", response_model=PermissionResponseDTO, responses=VALIDATION_RESPONSES)
async def get_permission_by_name(name: str, session: AsyncSession = Depends(get_session)):
    use_case = GetPermission(SqlAlchemyPermissionRepository(session))
    return _unwrap(await use_case.by_name(name))


@router.get("/resources", response_model=List[str])
async def list_active_resources(session: AsyncSession = Depends(get_session)):
    """Distinct resources of active permissions."""
    result = await ListPermissions(SqlAlchemyPermissionRepository(session)).active_resources()
    return result.value


@router.get("/actions", response_model=List[str])
async def list_active_actions(session: AsyncSession = Depends(get_session)):
    """Distinct actions of active permissions."""
    result = await ListPermissions(SqlAlchemyPermissionRepository(session)).active_actions()
    return result.value


@router.get("/stats/count/active", response_model=int)
async def count_active_permissions(session: AsyncSession = Depends(get_session)):
    result = await ListPermissions(SqlAlchemyPermissionRepository(session)).count_active()
    return result.value


@router.get("/{permission_id}", response_model=PermissionResponseDTO, responses=VALIDATION_RESPONSES)
async def get_permission(permission_id: int, session: AsyncSession = Depends(get_session)):
    use_case = GetPermission(SqlAlchemyPermissionRepository(session))
    return _unwrap(await use_case.execute(permission_id))


@router.put("/{permission_id}", response_model=PermissionResponseDTO, responses=VALIDATION_RESPONSES)
async def update_permission(
    permission_id: int,
    request: PermissionRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update a permission.

    Uniqueness is checked against every other permission, so saving a
    permission unchanged succeeds. When `role_ids` is present the role set
    is replaced with exactly those roles (`[]` clears it); when it is
    omitted the roles are left as they are.

    **Returns:**
    - 200: Permission updated
    - 400: Field rule or uniqueness violated
    - 404: Permission not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdatePermission(
        uow,
        SqlAlchemyPermissionRepository(session),
        SqlAlchemyRoleRepository(session),
    )
    return _unwrap(await use_case.execute(permission_id, _to_command(request)))


@router.delete("/{permission_id}", status_code=status.HTTP_204_NO_CONTENT, responses=VALIDATION_RESPONSES)
async def delete_permission(permission_id: int, session: AsyncSession = Depends(get_session)):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeletePermission(uow, SqlAlchemyPermissionRepository(session))
    _unwrap(await use_case.execute(permission_id))
