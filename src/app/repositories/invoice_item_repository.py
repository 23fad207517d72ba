"""Invoice Item Repository Interface

Defines the contract for invoice line item persistence and reporting.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from src.domain.invoice_item import InvoiceItem, ItemType, ItemStatus


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Aggregates (totals, counts, statistics) only consider ACTIVE items
    unless stated otherwise.
    """

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[InvoiceItem]:
        pass

    @abstractmethod
    async def exists_by_id(self, item_id: int) -> bool:
        pass

    @abstractmethod
    async def create(self, item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            item: InvoiceItem with derived amounts already calculated

        Returns:
            Created InvoiceItem with generated ID
        """
        pass

    @abstractmethod
    async def update(self, item: InvoiceItem) -> InvoiceItem:
        pass

    @abstractmethod
    async def delete_by_id(self, item_id: int) -> None:
        pass

    @abstractmethod
    async def list_items(
        self,
        invoice_id: Optional[int] = None,
        client_id: Optional[int] = None,
        item_type: Optional[ItemType] = None,
        status: Optional[ItemStatus] = None,
        min_unit_price: Optional[Decimal] = None,
        max_unit_price: Optional[Decimal] = None,
        name_contains: Optional[str] = None,
        description_contains: Optional[str] = None,
        min_discount_percentage: Optional[Decimal] = None,
        min_tax_rate: Optional[Decimal] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> List[InvoiceItem]:
        """
        List items matching every given filter

        Args:
            invoice_id: Owning invoice
            client_id: Client of the owning invoice
            item_type: Exact item type
            status: Exact item status
            min_unit_price / max_unit_price: Inclusive unit price range
            name_contains: Case-insensitive substring of name
            description_contains: Case-insensitive substring of description
            min_discount_percentage: Discount percentage strictly greater than
            min_tax_rate: Tax rate strictly greater than
            created_from / created_to: Inclusive creation timestamp range

        Returns:
            Matching items ordered by id
        """
        pass

    @abstractmethod
    async def top_by_amount(self, limit: int) -> List[InvoiceItem]:
        """Active items with the highest total amount, descending"""
        pass

    @abstractmethod
    async def sum_amounts_by_invoice(self, invoice_id: int) -> Tuple[Decimal, Decimal, Decimal]:
        """
        Sum active item amounts of an invoice

        Returns:
            (total_amount, tax_amount, discount_amount); zeros when empty
        """
        pass

    @abstractmethod
    async def sum_total_by_client(self, client_id: int) -> Decimal:
        """Sum active item totals across the client's invoices; zero when empty"""
        pass

    @abstractmethod
    async def count_by_invoice(self, invoice_id: int, active_only: bool = False) -> int:
        pass

    @abstractmethod
    async def statistics_by_type(self) -> List[Tuple[ItemType, int, Decimal]]:
        """(type, count, total_amount) over active items"""
        pass

    @abstractmethod
    async def statistics_by_status(self) -> List[Tuple[ItemStatus, int, Decimal]]:
        """(status, count, total_amount) over all items"""
        pass
