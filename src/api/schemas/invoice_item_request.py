"""Request schemas for the Invoice Item API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.invoice_item import ItemType, ItemStatus


class InvoiceItemRequestSchema(BaseModel):
    """
    Request schema for creating or updating an invoice item

    Used for POST /invoice-items and PUT /invoice-items/{id}. Derived
    amounts (tax, discount, total) are computed server-side and never
    accepted from the client.
    """

    invoice_id: int = Field(..., description="Owning invoice ID")

    name: str = Field(..., min_length=1, max_length=255, description="Item name")

    description: Optional[str] = Field(default=None, max_length=1000)

    quantity: int = Field(..., ge=1, le=999999, description="Number of units")

    unit_price: Decimal = Field(
        ...,
        ge=Decimal("0.01"),
        le=Decimal("999999.99"),
        decimal_places=2,
        description="Price per unit",
    )

    item_type: ItemType = Field(default=ItemType.SERVICE)

    status: ItemStatus = Field(default=ItemStatus.ACTIVE)

    tax_rate: Decimal = Field(default=Decimal("0"), ge=0, le=100, decimal_places=2)

    discount_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100, decimal_places=2)

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "name": "Architecture review",
                "quantity": 3,
                "unit_price": "100.00",
                "item_type": "service",
                "tax_rate": "21",
                "discount_percentage": "10"
            }
        }
