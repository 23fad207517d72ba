"""DeleteRole Use Case"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.role_repository import RoleRepository


class DeleteRole:
    def __init__(self, uow: UnitOfWork, role_repo: RoleRepository):
        self.uow = uow
        self.role_repo = role_repo

    async def execute(self, role_id: int) -> Result[None]:
        try:
            if not await self.role_repo.exists_by_id(role_id):
                return Return.err(
                    NotFoundError(code="ROLE_NOT_FOUND", message=f"Role with ID {role_id} not found")
                )

            await self.role_repo.delete_by_id(role_id)
            await self.uow.commit()
            return Return.ok(None)

        except Exception:
            await self.uow.rollback()
            raise
