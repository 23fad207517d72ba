"""CreateInvoiceItem Use Case

Attaches a new line item to an existing invoice and derives its discount,
tax and total amounts.
"""

from src.libs.result import Result, Return
from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem
from .dtos import InvoiceItemCommandDTO, InvoiceItemResponseDTO


class CreateInvoiceItem:
    """
    Use Case: Create invoice line item

    Business Rules:
    1. The owning invoice must already exist
    2. Discount, tax and total are derived, never taken from the caller

    Flow:
    1. Look up the invoice
    2. Build the item and calculate its totals
    3. Persist and commit
    4. Return response
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

    async def execute(self, command: InvoiceItemCommandDTO) -> Result[InvoiceItemResponseDTO]:
        """
        Execute invoice item creation

        Args:
            command: InvoiceItemCommandDTO with invoice_id and item fields

        Returns:
            Result[InvoiceItemResponseDTO]: Created item or INVOICE_NOT_FOUND
        """
        try:
            # Step 1: The invoice is a required reference
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)
            if not invoice:
                return Return.err(
                    NotFoundError(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Items can only be attached to an existing invoice",
                    )
                )

            # Step 2: Build item and derive amounts
            item = InvoiceItem(
                invoice_id=invoice.id,
                name=command.name,
                description=command.description,
                quantity=command.quantity,
                unit_price=command.unit_price,
                item_type=command.item_type,
                status=command.status,
                tax_rate=command.tax_rate,
                discount_percentage=command.discount_percentage,
            )
            item.invoice = invoice
            item.calculate_totals()

            # Step 3: Persist
            created_item = await self.item_repo.create(item)
            await self.uow.commit()

            return Return.ok(InvoiceItemResponseDTO.from_entity(created_item))

        except Exception:
            await self.uow.rollback()
            raise
