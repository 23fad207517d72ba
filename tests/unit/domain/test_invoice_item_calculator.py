"""Unit tests for the invoice item calculator"""

from decimal import Decimal
from src.domain.invoice_item_calculator import calculate_item_totals, to_cents
from src.domain.invoice_item import InvoiceItem, ItemType, ItemStatus


class TestCalculateItemTotals:
    def test_discount_then_tax(self):
        """3 x 100.00 with 10% discount and 21% tax"""
        totals = calculate_item_totals(
            quantity=3,
            unit_price=Decimal("100.00"),
            tax_rate=Decimal("21"),
            discount_percentage=Decimal("10"),
        )

        assert totals.subtotal == Decimal("300.00")
        assert totals.discount_amount == Decimal("30.00")
        assert totals.tax_amount == Decimal("56.70")
        assert totals.total_amount == Decimal("326.70")

    def test_no_tax_no_discount(self):
        totals = calculate_item_totals(quantity=2, unit_price=Decimal("19.99"))

        assert totals.discount_amount == Decimal("0.00")
        assert totals.tax_amount == Decimal("0.00")
        assert totals.total_amount == Decimal("39.98")

    def test_full_discount_zeroes_tax_and_total(self):
        totals = calculate_item_totals(
            quantity=5,
            unit_price=Decimal("40.00"),
            tax_rate=Decimal("21"),
            discount_percentage=Decimal("100"),
        )

        assert totals.discount_amount == Decimal("200.00")
        assert totals.tax_amount == Decimal("0.00")
        assert totals.total_amount == Decimal("0.00")

    def test_tax_is_charged_on_discounted_amount(self):
        totals = calculate_item_totals(
            quantity=1,
            unit_price=Decimal("200.00"),
            tax_rate=Decimal("10"),
            discount_percentage=Decimal("50"),
        )

        # 10% of 100.00, not of 200.00
        assert totals.tax_amount == Decimal("10.00")
        assert totals.total_amount == Decimal("110.00")

    def test_rounds_half_up_to_cents(self):
        totals = calculate_item_totals(
            quantity=1,
            unit_price=Decimal("0.05"),
            tax_rate=Decimal("10"),
        )

        # 0.005 rounds up
        assert totals.tax_amount == Decimal("0.01")
        assert totals.total_amount == Decimal("0.06")

    def test_total_identity_holds_with_fractional_rates(self):
        totals = calculate_item_totals(
            quantity=7,
            unit_price=Decimal("13.37"),
            tax_rate=Decimal("8.25"),
            discount_percentage=Decimal("12.5"),
        )

        assert totals.total_amount == totals.subtotal - totals.discount_amount + totals.tax_amount
        assert totals.total_amount.as_tuple().exponent == -2

    def test_maximum_values_fit_column_precision(self):
        totals = calculate_item_totals(quantity=999999, unit_price=Decimal("999999.99"))

        assert totals.total_amount == Decimal("999998990000.01")
        assert len(totals.total_amount.as_tuple().digits) <= 15

    def test_accepts_strings_and_ints(self):
        totals = calculate_item_totals(quantity=2, unit_price="10.00", tax_rate=5, discount_percentage="0")

        assert totals.total_amount == Decimal("21.00")

    def test_to_cents(self):
        assert to_cents(Decimal("1.005")) == Decimal("1.01")
        assert to_cents(Decimal("2")) == Decimal("2.00")


class TestInvoiceItemCalculateTotals:
    def test_calculate_totals_sets_derived_amounts(self):
        item = InvoiceItem(
            invoice_id=1,
            name="Consulting",
            quantity=3,
            unit_price=Decimal("100.00"),
            item_type=ItemType.SERVICE,
            status=ItemStatus.ACTIVE,
            tax_rate=Decimal("21"),
            discount_percentage=Decimal("10"),
        )

        item.calculate_totals()

        assert item.discount_amount == Decimal("30.00")
        assert item.tax_amount == Decimal("56.70")
        assert item.total_amount == Decimal("326.70")

    def test_recalculation_replaces_previous_amounts(self):
        item = InvoiceItem(
            invoice_id=1,
            name="Consulting",
            quantity=1,
            unit_price=Decimal("100.00"),
            tax_rate=Decimal("21"),
        )
        item.calculate_totals()

        item.quantity = 2
        item.tax_rate = Decimal("0")
        item.calculate_totals()

        assert item.tax_amount == Decimal("0.00")
        assert item.total_amount == Decimal("200.00")


class TestDisplayNames:
    def test_item_type_display_names(self):
        assert ItemType.SERVICE.display_name == "Service"
        assert ItemType.MATERIAL.display_name == "Material"

    def test_item_status_display_names(self):
        assert ItemStatus.ACTIVE.display_name == "Active"
        assert ItemStatus.RETURNED.display_name == "Returned"
