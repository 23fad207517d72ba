"""Data Transfer Objects for Invoice Item Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from src.domain.base import as_utc
from src.domain.invoice_item import InvoiceItem, ItemType, ItemStatus


class InvoiceItemCommandDTO(BaseModel):
    """
    Command DTO for creating or updating an invoice item

    Bounds are enforced here; the calculator assumes valid input.
    """

    invoice_id: int = Field(
        ...,
        description="Owning invoice ID (must exist)"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Item name"
    )

    description: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Item description"
    )

    quantity: int = Field(
        ...,
        ge=1,
        le=999999,
        description="Number of units (1..999999)"
    )

    unit_price: Decimal = Field(
        ...,
        ge=Decimal("0.01"),
        le=Decimal("999999.99"),
        decimal_places=2,
        description="Price per unit (0.01..999999.99)"
    )

    item_type: ItemType = Field(
        default=ItemType.SERVICE,
        description="Kind of item"
    )

    status: ItemStatus = Field(
        default=ItemStatus.ACTIVE,
        description="Item status"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Tax percentage (0..100)"
    )

    discount_percentage: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Discount percentage (0..100)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "name": "Architecture review",
                "description": "Two-day review of the platform architecture",
                "quantity": 3,
                "unit_price": "100.00",
                "item_type": "service",
                "status": "active",
                "tax_rate": "21",
                "discount_percentage": "10"
            }
        }


class InvoiceItemResponseDTO(BaseModel):
    """Invoice item with derived amounts and display names"""

    id: int
    invoice_id: int
    invoice_number: Optional[str] = None
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    quantity: int
    unit_price: Decimal
    item_type: str
    item_type_display: str
    status: str
    status_display: str
    tax_rate: Decimal
    tax_amount: Decimal
    discount_percentage: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemResponseDTO":
        invoice = item.invoice
        item_type = ItemType(item.item_type)
        status = ItemStatus(item.status)
        return cls(
            id=item.id,
            invoice_id=item.invoice_id,
            invoice_number=invoice.invoice_number if invoice else None,
            client_id=invoice.client_id if invoice else None,
            client_name=invoice.client_name if invoice else None,
            name=item.name,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            item_type=item_type.value,
            item_type_display=item_type.display_name,
            status=status.value,
            status_display=status.display_name,
            tax_rate=item.tax_rate,
            tax_amount=item.tax_amount,
            discount_percentage=item.discount_percentage,
            discount_amount=item.discount_amount,
            total_amount=item.total_amount,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class InvoiceItemFilterDTO(BaseModel):
    """
    Filters for listing invoice items

    Every filter that is set must match.
    """

    invoice_id: Optional[int] = None
    client_id: Optional[int] = None
    item_type: Optional[ItemType] = None
    status: Optional[ItemStatus] = None
    min_unit_price: Optional[Decimal] = None
    max_unit_price: Optional[Decimal] = None
    name_contains: Optional[str] = None
    description_contains: Optional[str] = None
    min_discount_percentage: Optional[Decimal] = None
    min_tax_rate: Optional[Decimal] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def normalize_timezone(cls, v):
        """Naive bounds are taken as UTC"""
        return as_utc(v)


class InvoiceTotalsDTO(BaseModel):
    """Per-invoice aggregates over its line items"""

    invoice_id: int = Field(..., description="Invoice ID")
    total_amount: Decimal = Field(..., description="Sum of active item totals")
    total_tax: Decimal = Field(..., description="Sum of active item tax amounts")
    total_discount: Decimal = Field(..., description="Sum of active item discount amounts")
    item_count: int = Field(..., description="Number of items (any status)")
    active_item_count: int = Field(..., description="Number of active items")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "total_amount": "326.70",
                "total_tax": "56.70",
                "total_discount": "30.00",
                "item_count": 2,
                "active_item_count": 1
            }
        }


class ClientTotalDTO(BaseModel):
    """Sum of active item totals across a client's invoices"""

    client_id: int
    total_amount: Decimal


class ItemStatisticDTO(BaseModel):
    """Count and total amount for one item type or status"""

    key: str
    display_name: str
    count: int
    total_amount: Decimal
