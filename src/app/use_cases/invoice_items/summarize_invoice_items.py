"""SummarizeInvoiceItems Use Case

Aggregates over invoice items: per-invoice totals and counts, per-client
totals, and statistics grouped by item type or status.
"""

from typing import List
from src.libs.result import Result, Return
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item_calculator import to_cents
from .dtos import ClientTotalDTO, InvoiceTotalsDTO, ItemStatisticDTO


class SummarizeInvoiceItems:
    """
    Invoice item reporting

    Business Rules:
    1. Amount totals only include ACTIVE items
       (per invoice and per client)
    2. An invoice without items totals zero
    3. Type statistics cover ACTIVE items, status statistics cover all items
    """

    def __init__(self, item_repo: InvoiceItemRepository):
        self.item_repo = item_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceTotalsDTO]:
        total, tax, discount = await self.item_repo.sum_amounts_by_invoice(invoice_id)
        item_count = await self.item_repo.count_by_invoice(invoice_id)
        active_count = await self.item_repo.count_by_invoice(invoice_id, active_only=True)

        return Return.ok(
            InvoiceTotalsDTO(
                invoice_id=invoice_id,
                total_amount=to_cents(total),
                total_tax=to_cents(tax),
                total_discount=to_cents(discount),
                item_count=item_count,
                active_item_count=active_count,
            )
        )

    async def total_by_client(self, client_id: int) -> Result[ClientTotalDTO]:
        total = await self.item_repo.sum_total_by_client(client_id)
        return Return.ok(ClientTotalDTO(client_id=client_id, total_amount=to_cents(total)))

    async def statistics_by_type(self) -> Result[List[ItemStatisticDTO]]:
        rows = await self.item_repo.statistics_by_type()
        return Return.ok([
            ItemStatisticDTO(
                key=item_type.value,
                display_name=item_type.display_name,
                count=count,
                total_amount=to_cents(amount),
            )
            for item_type, count, amount in rows
        ])

    async def statistics_by_status(self) -> Result[List[ItemStatisticDTO]]:
        rows = await self.item_repo.statistics_by_status()
        return Return.ok([
            ItemStatisticDTO(
                key=status.value,
                display_name=status.display_name,
                count=count,
                total_amount=to_cents(amount),
            )
            for status, count, amount in rows
        ])
