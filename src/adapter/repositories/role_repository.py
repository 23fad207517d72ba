"""SQLAlchemy Role Repository Implementation"""

from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.role_repository import RoleRepository
from src.domain.base import utc_now
from src.domain.links import RolePermissionLink, UserRoleLink
from src.domain.role import Role


class SqlAlchemyRoleRepository(RoleRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        statement = select(Role).where(Role.id == role_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Role]:
        statement = select(Role).where(Role.name == name)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all_by_ids(self, role_ids: List[int]) -> List[Role]:
        if not role_ids:
            return []
        statement = select(Role).where(Role.id.in_(role_ids)).order_by(Role.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_by_id(self, role_id: int) -> bool:
        statement = select(func.count()).select_from(Role).where(Role.id == role_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        statement = select(func.count()).select_from(Role).where(Role.name == name)
        if exclude_id is not None:
            statement = statement.where(Role.id != exclude_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def list_roles(
        self,
        active_only: bool = False,
        permission_id: Optional[int] = None,
        user_id: Optional[int] = None,
        name_contains: Optional[str] = None,
    ) -> List[Role]:
        statement = select(Role)

        if permission_id is not None:
            statement = statement.join(
                RolePermissionLink, RolePermissionLink.role_id == Role.id
            ).where(RolePermissionLink.permission_id == permission_id)
        if user_id is not None:
            statement = statement.join(
                UserRoleLink, UserRoleLink.role_id == Role.id
            ).where(UserRoleLink.user_id == user_id)
        if active_only:
            statement = statement.where(Role.is_active == True)  # noqa: E712
        if name_contains:
            statement = statement.where(Role.name.contains(name_contains))

        statement = statement.order_by(Role.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_active(self) -> int:
        statement = (
            select(func.count())
            .select_from(Role)
            .where(Role.is_active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def create(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def update(self, role: Role) -> Role:
        role.updated_at = utc_now()
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def delete_by_id(self, role_id: int) -> None:
        role = await self.get_by_id(role_id)
        if role is not None:
            role.permissions = []
            role.users = []
            await self.session.delete(role)
            await self.session.flush()
