"""DeleteInvoiceItem Use Case"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_item_repository import InvoiceItemRepository


class DeleteInvoiceItem:
    """Hard-deletes a line item; the invoice itself is untouched"""

    def __init__(self, uow: UnitOfWork, item_repo: InvoiceItemRepository):
        self.uow = uow
        self.item_repo = item_repo

    async def execute(self, item_id: int) -> Result[None]:
        try:
            if not await self.item_repo.exists_by_id(item_id):
                return Return.err(
                    NotFoundError(
                        code="INVOICE_ITEM_NOT_FOUND",
                        message=f"Invoice item with ID {item_id} not found",
                    )
                )

            await self.item_repo.delete_by_id(item_id)
            await self.uow.commit()
            return Return.ok(None)

        except Exception:
            await self.uow.rollback()
            raise
