"""Unit tests for UTC timestamp handling on entities"""

from datetime import datetime, timedelta, timezone
import pytest

from src.domain import Invoice, InvoiceItem, Permission, Role, User
from src.domain.base import as_utc, utc_now


class TestAsUtc:
    def test_none_passes_through(self):
        assert as_utc(None) is None

    def test_naive_value_is_taken_as_utc(self):
        assert as_utc(datetime(2024, 5, 1, 12, 0)) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_aware_value_is_converted(self):
        madrid = timezone(timedelta(hours=2))

        value = as_utc(datetime(2024, 5, 1, 14, 0, tzinfo=madrid))

        assert value.tzinfo == timezone.utc
        assert value.hour == 12


class TestEntityTimestamps:
    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo is not None

    @pytest.mark.parametrize("entity", [
        Invoice(invoice_number="INV-1"),
        InvoiceItem(invoice_id=1, name="Consulting"),
        Permission(name="invoice:read", resource="invoice", action="read"),
        Role(name="Auditor"),
        User(email="auditor@example.com", name="Auditor"),
    ])
    def test_defaults_are_timezone_aware(self, entity):
        assert entity.created_at.tzinfo is not None
        assert entity.updated_at.tzinfo is not None

    @pytest.mark.parametrize("model", [Invoice, InvoiceItem, Permission, Role, User])
    def test_timestamp_columns_store_timezone(self, model):
        columns = model.__table__.c

        assert columns.created_at.type.timezone is True
        assert columns.updated_at.type.timezone is True
