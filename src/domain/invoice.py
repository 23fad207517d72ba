"""Invoice Domain Entity

Billing invoice issued to a client. Line items hang off an invoice and
require it to exist before they can be attached.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, IdType, UtcDateTime, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document issued to a client

    Domain Rules:
    - invoice_number must be unique
    - Owns its line items (deleting an invoice deletes its items)
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., FAC-2024-001)"
    )

    client_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, nullable=True, index=True),
        description="Invoiced client; clients are managed outside this service"
    )

    client_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Name of the invoiced client"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, sent, paid, overdue, cancelled)"
    )

    amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(15, 2), nullable=False),
        description="Invoice amount (precision: 15,2)"
    )

    issued_at: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Issue date"
    )

    paid_at: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Payment date"
    )

    payment_terms: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UtcDateTime,
        description="Last update timestamp"
    )
