"""DeletePermission Use Case"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.permission_repository import PermissionRepository


class DeletePermission:
    """Hard-deletes a permission together with its role links"""

    def __init__(self, uow: UnitOfWork, permission_repo: PermissionRepository):
        self.uow = uow
        self.permission_repo = permission_repo

    async def execute(self, permission_id: int) -> Result[None]:
        try:
            if not await self.permission_repo.exists_by_id(permission_id):
                return Return.err(
                    NotFoundError(
                        code="PERMISSION_NOT_FOUND",
                        message=f"Permission with ID {permission_id} not found",
                    )
                )

            await self.permission_repo.delete_by_id(permission_id)
            await self.uow.commit()
            return Return.ok(None)

        except Exception:
            await self.uow.rollback()
            raise
