"""Integration tests for invoice item use cases against SQLite"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.app.use_cases.invoice_items import (
    CreateInvoiceItem,
    UpdateInvoiceItem,
    DeleteInvoiceItem,
    ListInvoiceItems,
    SummarizeInvoiceItems,
    InvoiceItemCommandDTO,
    InvoiceItemFilterDTO,
)
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem, ItemType, ItemStatus


def command(invoice_id, **overrides):
    values = dict(
        invoice_id=invoice_id,
        name="Architecture review",
        quantity=3,
        unit_price=Decimal("100.00"),
        tax_rate=Decimal("21"),
        discount_percentage=Decimal("10"),
    )
    values.update(overrides)
    return InvoiceItemCommandDTO(**values)


@pytest.fixture
def repos(db_session):
    return SqlAlchemyInvoiceRepository(db_session), SqlAlchemyInvoiceItemRepository(db_session)


async def create_item(uow, repos, cmd):
    invoice_repo, item_repo = repos
    result = await CreateInvoiceItem(uow, invoice_repo, item_repo).execute(cmd)
    assert result.is_ok()
    return result.value


class TestInvoiceItemLifecycle:
    @pytest.mark.asyncio
    async def test_create_persists_derived_amounts(self, uow, repos, invoice, db_session):
        created = await create_item(uow, repos, command(invoice.id))

        stored = await db_session.get(InvoiceItem, created.id)
        assert stored.discount_amount == Decimal("30.00")
        assert stored.tax_amount == Decimal("56.70")
        assert stored.total_amount == Decimal("326.70")
        assert created.client_name == "Acme Corp"

    @pytest.mark.asyncio
    async def test_create_for_missing_invoice_persists_nothing(self, uow, repos, db_session):
        invoice_repo, item_repo = repos

        result = await CreateInvoiceItem(uow, invoice_repo, item_repo).execute(command(999))

        assert result.error.code == "INVOICE_NOT_FOUND"
        assert await item_repo.list_items() == []

    @pytest.mark.asyncio
    async def test_update_recomputes(self, uow, repos, invoice):
        invoice_repo, item_repo = repos
        created = await create_item(uow, repos, command(invoice.id))

        result = await UpdateInvoiceItem(uow, invoice_repo, item_repo).execute(
            created.id,
            command(invoice.id, quantity=1, discount_percentage=Decimal("100")),
        )

        assert result.value.discount_amount == Decimal("100.00")
        assert result.value.tax_amount == Decimal("0.00")
        assert result.value.total_amount == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_delete(self, uow, repos, invoice):
        _, item_repo = repos
        created = await create_item(uow, repos, command(invoice.id))

        result = await DeleteInvoiceItem(uow, item_repo).execute(created.id)

        assert result.is_ok()
        assert await item_repo.get_by_id(created.id) is None

        again = await DeleteInvoiceItem(uow, item_repo).execute(created.id)
        assert again.error.code == "INVOICE_ITEM_NOT_FOUND"


class TestInvoiceItemQueries:
    @pytest.mark.asyncio
    async def test_filters(self, uow, repos, invoice):
        _, item_repo = repos
        await create_item(uow, repos, command(invoice.id, name="Senior consulting", description="On-site WORK"))
        await create_item(
            uow, repos,
            command(invoice.id, name="Laptop", item_type=ItemType.PRODUCT, unit_price=Decimal("900.00"),
                    tax_rate=Decimal("0"), discount_percentage=Decimal("0")),
        )
        await create_item(
            uow, repos,
            command(invoice.id, name="Travel", item_type=ItemType.OTHER, status=ItemStatus.CANCELLED,
                    unit_price=Decimal("20.00")),
        )
        use_case = ListInvoiceItems(item_repo)

        by_type = await use_case.execute(InvoiceItemFilterDTO(item_type=ItemType.PRODUCT))
        assert [item.name for item in by_type.value] == ["Laptop"]

        by_name = await use_case.execute(InvoiceItemFilterDTO(name_contains="CONSULT"))
        assert [item.name for item in by_name.value] == ["Senior consulting"]

        by_description = await use_case.execute(InvoiceItemFilterDTO(description_contains="on-site"))
        assert len(by_description.value) == 1

        by_price = await use_case.execute(
            InvoiceItemFilterDTO(min_unit_price=Decimal("50"), max_unit_price=Decimal("500"))
        )
        assert [item.name for item in by_price.value] == ["Senior consulting"]

        with_discount = await use_case.execute(InvoiceItemFilterDTO(min_discount_percentage=Decimal("0")))
        assert {item.name for item in with_discount.value} == {"Senior consulting", "Travel"}

        with_tax = await use_case.execute(InvoiceItemFilterDTO(min_tax_rate=Decimal("20")))
        assert len(with_tax.value) == 2

        active = await use_case.execute(InvoiceItemFilterDTO(invoice_id=invoice.id, status=ItemStatus.ACTIVE))
        assert len(active.value) == 2

        now = datetime.now(timezone.utc)
        in_range = await use_case.execute(
            InvoiceItemFilterDTO(created_from=now - timedelta(hours=1), created_to=now + timedelta(hours=1))
        )
        assert len(in_range.value) == 3

        top = await use_case.top_by_amount(1)
        assert [item.name for item in top.value] == ["Laptop"]

    @pytest.mark.asyncio
    async def test_totals_only_count_active_items(self, uow, repos, invoice):
        _, item_repo = repos
        await create_item(uow, repos, command(invoice.id))
        await create_item(uow, repos, command(invoice.id, status=ItemStatus.CANCELLED))

        result = await SummarizeInvoiceItems(item_repo).execute(invoice.id)

        totals = result.value
        assert totals.total_amount == Decimal("326.70")
        assert totals.total_tax == Decimal("56.70")
        assert totals.total_discount == Decimal("30.00")
        assert totals.item_count == 2
        assert totals.active_item_count == 1

    @pytest.mark.asyncio
    async def test_totals_for_invoice_without_items(self, repos, invoice):
        _, item_repo = repos

        result = await SummarizeInvoiceItems(item_repo).execute(invoice.id)

        assert result.value.total_amount == Decimal("0.00")
        assert result.value.item_count == 0

    @pytest.mark.asyncio
    async def test_statistics(self, uow, repos, invoice):
        _, item_repo = repos
        await create_item(uow, repos, command(invoice.id))
        await create_item(uow, repos, command(invoice.id, item_type=ItemType.HOUR))
        await create_item(uow, repos, command(invoice.id, status=ItemStatus.PENDING))

        by_type = (await SummarizeInvoiceItems(item_repo).statistics_by_type()).value
        by_status = (await SummarizeInvoiceItems(item_repo).statistics_by_status()).value

        type_counts = {stat.key: stat.count for stat in by_type}
        assert type_counts == {"service": 1, "hour": 1}
        status_counts = {stat.key: stat.count for stat in by_status}
        assert status_counts == {"active": 2, "pending": 1}


class TestClientQueries:
    @pytest.mark.asyncio
    async def test_items_and_total_span_the_clients_invoices(self, uow, repos, invoice, db_session):
        _, item_repo = repos
        second = Invoice(invoice_number="INV-2024-0002", client_id=invoice.client_id)
        other_client = Invoice(invoice_number="INV-2024-0003", client_id=7)
        db_session.add_all([second, other_client])
        await db_session.commit()

        await create_item(uow, repos, command(invoice.id))
        await create_item(uow, repos, command(second.id, name="Workshop"))
        await create_item(uow, repos, command(second.id, name="Refunded", status=ItemStatus.RETURNED))
        await create_item(uow, repos, command(other_client.id, name="Elsewhere"))

        listed = await ListInvoiceItems(item_repo).execute(InvoiceItemFilterDTO(client_id=invoice.client_id))
        total = await SummarizeInvoiceItems(item_repo).total_by_client(invoice.client_id)

        assert {item.name for item in listed.value} == {"Architecture review", "Workshop", "Refunded"}
        assert total.value.total_amount == Decimal("653.40")

    @pytest.mark.asyncio
    async def test_unknown_client_totals_zero(self, repos):
        _, item_repo = repos

        total = await SummarizeInvoiceItems(item_repo).total_by_client(999)
        listed = await ListInvoiceItems(item_repo).execute(InvoiceItemFilterDTO(client_id=999))

        assert total.value.total_amount == Decimal("0.00")
        assert listed.value == []
