"""Invoice Item Domain Entity

One billable line within an invoice. Discount, tax and total amounts are
derived from quantity, unit price, tax rate and discount percentage and
are recomputed on every write.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from src.domain.base import BaseModel, IdType, UtcDateTime, utc_now
from src.domain.invoice import Invoice
from src.domain.invoice_item_calculator import calculate_item_totals


class ItemType(str, Enum):
    """Kinds of billable items"""
    SERVICE = "service"
    PRODUCT = "product"
    HOUR = "hour"
    MATERIAL = "material"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ItemStatus(str, Enum):
    """Line item states"""
    ACTIVE = "active"
    CANCELLED = "cancelled"
    RETURNED = "returned"
    PENDING = "pending"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Billable line within an invoice

    Domain Rules:
    - Each item belongs to exactly one existing invoice
    - discount_amount = quantity * unit_price * discount_percentage / 100
    - tax_amount is charged on the discounted subtotal
    - total_amount = subtotal - discount_amount + tax_amount
    - Only ACTIVE items count towards invoice totals
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
        Index('ix_invoice_items_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(IdType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item name"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Item description"
    )

    quantity: int = Field(
        default=1,
        sa_column=Column(Integer, nullable=False),
        description="Number of units (1..999999)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(15, 2), nullable=False),
        description="Price per unit (precision: 15,2)"
    )

    item_type: ItemType = Field(
        default=ItemType.SERVICE,
        description="Kind of item (service, product, hour, material, other)"
    )

    status: ItemStatus = Field(
        default=ItemStatus.ACTIVE,
        description="Item status (active, cancelled, returned, pending)"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
        description="Tax percentage (0..100)"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Derived tax amount"
    )

    discount_percentage: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
        description="Discount percentage (0..100)"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Derived discount amount"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(15, 2), nullable=False, default=0),
        description="Derived total amount"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Item creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Last update timestamp"
    )

    invoice: Optional[Invoice] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )

    def calculate_totals(self) -> None:
        """Recompute derived amounts from the current inputs"""
        totals = calculate_item_totals(
            quantity=self.quantity,
            unit_price=self.unit_price,
            tax_rate=self.tax_rate,
            discount_percentage=self.discount_percentage,
        )
        self.discount_amount = totals.discount_amount
        self.tax_amount = totals.tax_amount
        self.total_amount = totals.total_amount
