"""ListInvoiceItems Use Case

Read-only listing of invoice items by any combination of filters, plus the
top active items by total amount.
"""

from typing import List
from src.libs.result import Result, Return
from src.app.errors import ValidationError
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceItemFilterDTO, InvoiceItemResponseDTO


class ListInvoiceItems:
    def __init__(self, item_repo: InvoiceItemRepository):
        self.item_repo = item_repo

    async def execute(self, filters: InvoiceItemFilterDTO) -> Result[List[InvoiceItemResponseDTO]]:
        """
        List items matching every filter that is set

        Args:
            filters: InvoiceItemFilterDTO (all fields optional)

        Returns:
            Result[List[InvoiceItemResponseDTO]]: Matching items ordered by id
        """
        if (
            filters.min_unit_price is not None
            and filters.max_unit_price is not None
            and filters.min_unit_price > filters.max_unit_price
        ):
            return Return.err(
                ValidationError(
                    code="INVALID_PRICE_RANGE",
                    message="min_unit_price cannot be greater than max_unit_price",
                )
            )

        if (
            filters.created_from is not None
            and filters.created_to is not None
            and filters.created_from > filters.created_to
        ):
            return Return.err(
                ValidationError(
                    code="INVALID_DATE_RANGE",
                    message="created_from cannot be after created_to",
                )
            )

        items = await self.item_repo.list_items(**filters.model_dump())
        return Return.ok([InvoiceItemResponseDTO.from_entity(item) for item in items])

    async def top_by_amount(self, limit: int = 10) -> Result[List[InvoiceItemResponseDTO]]:
        if limit < 1:
            return Return.err(
                ValidationError(
                    code="INVALID_LIMIT",
                    message="limit must be at least 1",
                )
            )
        items = await self.item_repo.top_by_amount(limit)
        return Return.ok([InvoiceItemResponseDTO.from_entity(item) for item in items])
