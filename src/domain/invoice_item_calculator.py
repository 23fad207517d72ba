"""Invoice Item Calculator

Derives the discount, tax and total of an invoice line item.

Order of operations is fixed: the discount is taken off the subtotal first
and tax is charged on what remains, never the other way round.

    subtotal        = quantity * unit_price
    discount_amount = subtotal * discount_percentage / 100
    tax_amount      = (subtotal - discount_amount) * tax_rate / 100
    total_amount    = subtotal - discount_amount + tax_amount

Every derived amount is quantized to cents (ROUND_HALF_UP) so that the
stored values satisfy the total identity exactly.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Union

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

Number = Union[Decimal, int, str]


class ItemTotals(NamedTuple):
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_item_totals(
    quantity: int,
    unit_price: Number,
    tax_rate: Number = Decimal("0"),
    discount_percentage: Number = Decimal("0"),
) -> ItemTotals:
    """
    Calculate line item amounts

    Inputs are assumed to be within their documented ranges; callers
    validate them beforehand.

    Args:
        quantity: Number of units (1..999999)
        unit_price: Price per unit (0.01..999999.99)
        tax_rate: Tax percentage (0..100)
        discount_percentage: Discount percentage (0..100)

    Returns:
        ItemTotals with subtotal, discount, tax and total (all in cents)
    """
    subtotal = to_cents(Decimal(quantity) * Decimal(unit_price))

    discount_amount = to_cents(subtotal * Decimal(discount_percentage or 0) / HUNDRED)
    taxable = subtotal - discount_amount

    tax_amount = to_cents(taxable * Decimal(tax_rate or 0) / HUNDRED)
    total_amount = taxable + tax_amount

    return ItemTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        total_amount=total_amount,
    )
