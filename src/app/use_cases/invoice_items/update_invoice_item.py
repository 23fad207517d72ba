"""UpdateInvoiceItem Use Case

Replaces the fields of a line item and recomputes its derived amounts.
"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceItemCommandDTO, InvoiceItemResponseDTO


class UpdateInvoiceItem:
    """
    Use Case: Update invoice line item

    Business Rules:
    1. The item must exist
    2. Moving the item to another invoice requires that invoice to exist
    3. Derived amounts are recomputed from the new inputs
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, item_id: int, command: InvoiceItemCommandDTO) -> Result[InvoiceItemResponseDTO]:
        try:
            item = await self.item_repo.get_by_id(item_id)
            if not item:
                return Return.err(
                    NotFoundError(
                        code="INVOICE_ITEM_NOT_FOUND",
                        message=f"Invoice item with ID {item_id} not found",
                    )
                )

            if item.invoice_id != command.invoice_id:
                invoice = await self.invoice_repo.get_by_id(command.invoice_id)
                if not invoice:
                    return Return.err(
                        NotFoundError(
                            code="INVOICE_NOT_FOUND",
                            message=f"Invoice with ID {command.invoice_id} not found",
                            reason="Items can only be moved to an existing invoice",
                        )
                    )
                item.invoice_id = invoice.id
                item.invoice = invoice

            item.name = command.name
            item.description = command.description
            item.quantity = command.quantity
            item.unit_price = command.unit_price
            item.item_type = command.item_type
            item.status = command.status
            item.tax_rate = command.tax_rate
            item.discount_percentage = command.discount_percentage
            item.calculate_totals()

            updated_item = await self.item_repo.update(item)
            await self.uow.commit()

            return Return.ok(InvoiceItemResponseDTO.from_entity(updated_item))

        except Exception:
            await self.uow.rollback()
            raise
