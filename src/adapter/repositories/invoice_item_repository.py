"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence and reporting queries using
SQLAlchemy async session.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.base import as_utc, utc_now
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem, ItemType, ItemStatus


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _invoice_ids_of(client_id: int):
        return select(Invoice.id).where(Invoice.client_id == client_id)

    async def get_by_id(self, item_id: int) -> Optional[InvoiceItem]:
        statement = select(InvoiceItem).where(InvoiceItem.id == item_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists_by_id(self, item_id: int) -> bool:
        statement = select(func.count()).select_from(InvoiceItem).where(InvoiceItem.id == item_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, item: InvoiceItem) -> InvoiceItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update(self, item: InvoiceItem) -> InvoiceItem:
        item.updated_at = utc_now()
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_by_id(self, item_id: int) -> None:
        item = await self.get_by_id(item_id)
        if item is not None:
            await self.session.delete(item)
            await self.session.flush()

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
        statement = select(InvoiceItem)

        if invoice_id is not None:
            statement = statement.where(InvoiceItem.invoice_id == invoice_id)
        if client_id is not None:
            statement = statement.where(InvoiceItem.invoice_id.in_(self._invoice_ids_of(client_id)))
        if item_type is not None:
            statement = statement.where(InvoiceItem.item_type == item_type)
        if status is not None:
            statement = statement.where(InvoiceItem.status == status)
        if min_unit_price is not None:
            statement = statement.where(InvoiceItem.unit_price >= min_unit_price)
        if max_unit_price is not None:
            statement = statement.where(InvoiceItem.unit_price <= max_unit_price)
        if name_contains:
            statement = statement.where(InvoiceItem.name.ilike(f"%{name_contains}%"))
        if description_contains:
            statement = statement.where(InvoiceItem.description.ilike(f"%{description_contains}%"))
        if min_discount_percentage is not None:
            statement = statement.where(InvoiceItem.discount_percentage > min_discount_percentage)
        if min_tax_rate is not None:
            statement = statement.where(InvoiceItem.tax_rate > min_tax_rate)
        if created_from is not None:
            statement = statement.where(InvoiceItem.created_at >= as_utc(created_from))
        if created_to is not None:
            statement = statement.where(InvoiceItem.created_at <= as_utc(created_to))

        statement = statement.order_by(InvoiceItem.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def top_by_amount(self, limit: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.status == ItemStatus.ACTIVE)
            .order_by(InvoiceItem.total_amount.desc())
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def sum_amounts_by_invoice(self, invoice_id: int) -> Tuple[Decimal, Decimal, Decimal]:
        statement = (
            select(
                func.coalesce(func.sum(InvoiceItem.total_amount), 0),
                func.coalesce(func.sum(InvoiceItem.tax_amount), 0),
                func.coalesce(func.sum(InvoiceItem.discount_amount), 0),
            )
            .where(InvoiceItem.invoice_id == invoice_id)
            .where(InvoiceItem.status == ItemStatus.ACTIVE)
        )
        result = await self.session.execute(statement)
        total, tax, discount = result.one()
        return Decimal(str(total)), Decimal(str(tax)), Decimal(str(discount))

    async def sum_total_by_client(self, client_id: int) -> Decimal:
        statement = (
            select(func.coalesce(func.sum(InvoiceItem.total_amount), 0))
            .where(InvoiceItem.invoice_id.in_(self._invoice_ids_of(client_id)))
            .where(InvoiceItem.status == ItemStatus.ACTIVE)
        )
        result = await self.session.execute(statement)
        return Decimal(str(result.scalar_one()))

    async def count_by_invoice(self, invoice_id: int, active_only: bool = False) -> int:
        statement = (
            select(func.count())
            .select_from(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
        )
        if active_only:
            statement = statement.where(InvoiceItem.status == ItemStatus.ACTIVE)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def statistics_by_type(self) -> List[Tuple[ItemType, int, Decimal]]:
        statement = (
            select(
                InvoiceItem.item_type,
                func.count(InvoiceItem.id),
                func.coalesce(func.sum(InvoiceItem.total_amount), 0),
            )
            .where(InvoiceItem.status == ItemStatus.ACTIVE)
            .group_by(InvoiceItem.item_type)
        )
        result = await self.session.execute(statement)
        return [(row[0], row[1], Decimal(str(row[2]))) for row in result.all()]

    async def statistics_by_status(self) -> List[Tuple[ItemStatus, int, Decimal]]:
        statement = (
            select(
                InvoiceItem.status,
                func.count(InvoiceItem.id),
                func.coalesce(func.sum(InvoiceItem.total_amount), 0),
            )
            .group_by(InvoiceItem.status)
        )
        result = await self.session.execute(statement)
        return [(row[0], row[1], Decimal(str(row[2]))) for row in result.all()]
