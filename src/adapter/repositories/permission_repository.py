"""SQLAlchemy Permission Repository Implementation

The database also enforces unique name and unique (resource, action); the
exists_* checks give friendly errors, the constraints close the race.
"""

from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.permission_repository import PermissionRepository
from src.domain.base import utc_now
from src.domain.links import RolePermissionLink
from src.domain.permission import Permission


class SqlAlchemyPermissionRepository(PermissionRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, permission_id: int) -> Optional[Permission]:
        statement = select(Permission).where(Permission.id == permission_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Permission]:
        statement = select(Permission).where(Permission.name == name)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_resource_and_action(self, resource: str, action: str) -> Optional[Permission]:
        statement = (
            select(Permission)
            .where(Permission.resource == resource)
            .where(Permission.action == action)
            .order_by(Permission.id)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all_by_ids(self, permission_ids: List[int]) -> List[Permission]:
        if not permission_ids:
            return []
        statement = select(Permission).where(Permission.id.in_(permission_ids)).order_by(Permission.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_by_id(self, permission_id: int) -> bool:
        statement = select(func.count()).select_from(Permission).where(Permission.id == permission_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        statement = select(func.count()).select_from(Permission).where(Permission.name == name)
        if exclude_id is not None:
            statement = statement.where(Permission.id != exclude_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def exists_by_resource_and_action(
        self, resource: str, action: str, exclude_id: Optional[int] = None
    ) -> bool:
        statement = (
            select(func.count())
            .select_from(Permission)
            .where(Permission.resource == resource)
            .where(Permission.action == action)
        )
        if exclude_id is not None:
            statement = statement.where(Permission.id != exclude_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, permission: Permission) -> Permission:
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def update(self, permission: Permission) -> Permission:
        permission.updated_at = utc_now()
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def delete_by_id(self, permission_id: int) -> None:
        permission = await self.get_by_id(permission_id)
        if permission is not None:
            # SQLite does not enforce FK cascades by default
            permission.roles = []
            await self.session.delete(permission)
            await self.session.flush()

    async def list_permissions(
        self,
        active_only: bool = False,
        role_id: Optional[int] = None,
        resource: Optional[str] = None,
        action: Optional[str] = None,
        name_contains: Optional[str] = None,
    ) -> List[Permission]:
        statement = select(Permission)

        if role_id is not None:
            statement = statement.join(
                RolePermissionLink, RolePermissionLink.permission_id == Permission.id
            ).where(RolePermissionLink.role_id == role_id)
        if active_only:
            statement = statement.where(Permission.is_active == True)  # noqa: E712
        if resource is not None:
            statement = statement.where(Permission.resource == resource)
        if action is not None:
            statement = statement.where(Permission.action == action)
        if name_contains:
            statement = statement.where(Permission.name.contains(name_contains))

        statement = statement.order_by(Permission.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_active_resources(self) -> List[str]:
        statement = (
            select(Permission.resource)
            .where(Permission.is_active == True)  # noqa: E712
            .distinct()
            .order_by(Permission.resource)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_active_actions(self) -> List[str]:
        statement = (
            select(Permission.action)
            .where(Permission.is_active == True)  # noqa: E712
            .distinct()
            .order_by(Permission.action)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_active(self) -> int:
        statement = (
            select(func.count())
            .select_from(Permission)
            .where(Permission.is_active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalar_one()
