"""GetInvoiceItem Use Case"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceItemResponseDTO


class GetInvoiceItem:
    def __init__(self, item_repo: InvoiceItemRepository):
        self.item_repo = item_repo

    async def execute(self, item_id: int) -> Result[InvoiceItemResponseDTO]:
        item = await self.item_repo.get_by_id(item_id)
        if not item:
            return Return.err(
                NotFoundError(
                    code="INVOICE_ITEM_NOT_FOUND",
                    message=f"Invoice item with ID {item_id} not found",
                )
            )
        return Return.ok(InvoiceItemResponseDTO.from_entity(item))
