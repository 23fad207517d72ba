"""Invoice Item API Routes

CRUD for invoice line items plus the listing, search and reporting
endpoints. Fixed paths are declared before /{item_id} so they are not
captured by it.
"""

from datetime import datetime
from decimal import Decimal
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_item_request import InvoiceItemRequestSchema
from src.app.use_cases.invoice_items import (
    CreateInvoiceItem,
    UpdateInvoiceItem,
    DeleteInvoiceItem,
    GetInvoiceItem,
    ListInvoiceItems,
    SummarizeInvoiceItems,
    InvoiceItemCommandDTO,
    InvoiceItemResponseDTO,
    InvoiceItemFilterDTO,
    InvoiceTotalsDTO,
    ItemStatisticDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.invoice_item import ItemType, ItemStatus
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoice-items", tags=["Invoice Items"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice or invoice item not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_ITEM_NOT_FOUND",
                        "message": "Invoice item with ID 123 not found"
                    }
                }
            }
        }
    }
}


def _to_command(request: InvoiceItemRequestSchema) -> InvoiceItemCommandDTO:
    return InvoiceItemCommandDTO(**request.model_dump())


async def _list(session: AsyncSession, filters: InvoiceItemFilterDTO) -> List[InvoiceItemResponseDTO]:
    result = await ListInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).execute(filters)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


async def _totals(session: AsyncSession, invoice_id: int) -> InvoiceTotalsDTO:
    result = await SummarizeInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).execute(invoice_id)
    return result.value


@router.get("", response_model=List[InvoiceItemResponseDTO])
async def list_invoice_items(session: AsyncSession = Depends(get_session)):
    """List every invoice item ordered by id."""
    return await _list(session, InvoiceItemFilterDTO())


@router.post(
    "",
    response_model=InvoiceItemResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSE,
)
async def create_invoice_item(
    request: InvoiceItemRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Add a line item to an existing invoice.

    Discount, tax and total are derived from quantity, unit price and the
    two percentages:

    - discount = round(quantity x unit_price x discount_percentage / 100)
    - tax = round((quantity x unit_price - discount) x tax_rate / 100)
    - total = quantity x unit_price - discount + tax

    **Returns:**
    - 201: Item created
    - 404: Invoice not found
    - 422: Request out of bounds
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateInvoiceItem(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/invoice/{invoice_id}", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return await _list(session, InvoiceItemFilterDTO(invoice_id=invoice_id))


@router.get("/invoice/{invoice_id}/active", response_model=List[InvoiceItemResponseDTO])
async def list_active_items_by_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return await _list(session, InvoiceItemFilterDTO(invoice_id=invoice_id, status=ItemStatus.ACTIVE))


@router.get("/invoice/{invoice_id}/summary", response_model=InvoiceTotalsDTO)
async def get_invoice_summary(invoice_id: int, session: AsyncSession = Depends(get_session)):
    """Totals over active items and item counts for one invoice."""
    return await _totals(session, invoice_id)


@router.get("/invoice/{invoice_id}/total", response_model=Decimal)
async def get_invoice_total(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return (await _totals(session, invoice_id)).total_amount


@router.get("/invoice/{invoice_id}/total-tax", response_model=Decimal)
async def get_invoice_total_tax(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return (await _totals(session, invoice_id)).total_tax


@router.get("/invoice/{invoice_id}/total-discount", response_model=Decimal)
async def get_invoice_total_discount(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return (await _totals(session, invoice_id)).total_discount


@router.get("/invoice/{invoice_id}/count", response_model=int)
async def count_invoice_items(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return (await _totals(session, invoice_id)).item_count


@router.get("/invoice/{invoice_id}/count-active", response_model=int)
async def count_active_invoice_items(invoice_id: int, session: AsyncSession = Depends(get_session)):
    return (await _totals(session, invoice_id)).active_item_count


@router.get("/client/{client_id}", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_client(client_id: int, session: AsyncSession = Depends(get_session)):
    """Items on any invoice of the client."""
    return await _list(session, InvoiceItemFilterDTO(client_id=client_id))


@router.get("/client/{client_id}/total", response_model=Decimal)
async def get_client_total(client_id: int, session: AsyncSession = Depends(get_session)):
    """Sum of active item totals across the client's invoices."""
    result = await SummarizeInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).total_by_client(client_id)
    return result.value.total_amount


@router.get("/type/{item_type}", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_type(item_type: ItemType, session: AsyncSession = Depends(get_session)):
    return await _list(session, InvoiceItemFilterDTO(item_type=item_type))


@router.get("/status/{item_status}", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_status(item_status: ItemStatus, session: AsyncSession = Depends(get_session)):
    return await _list(session, InvoiceItemFilterDTO(status=item_status))


@router.get("/price-range", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_price_range(
    min_price: Decimal = Query(..., alias="minPrice"),
    max_price: Decimal = Query(..., alias="maxPrice"),
    session: AsyncSession = Depends(get_session)
):
    """Items whose unit price lies in [minPrice, maxPrice]."""
    return await _list(
        session,
        InvoiceItemFilterDTO(min_unit_price=min_price, max_unit_price=max_price),
    )


@router.get("/search/name", response_model=List[InvoiceItemResponseDTO])
async def search_items_by_name(name: str, session: AsyncSession = Depends(get_session)):
    """Case-insensitive substring search on the item name."""
    return await _list(session, InvoiceItemFilterDTO(name_contains=name))


@router.get("/search/description", response_model=List[InvoiceItemResponseDTO])
async def search_items_by_description(description: str, session: AsyncSession = Depends(get_session)):
    return await _list(session, InvoiceItemFilterDTO(description_contains=description))


@router.get("/top-by-amount", response_model=List[InvoiceItemResponseDTO])
async def top_items_by_amount(limit: int = 10, session: AsyncSession = Depends(get_session)):
    """Active items with the highest total amount."""
    result = await ListInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).top_by_amount(limit)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/with-discount", response_model=List[InvoiceItemResponseDTO])
async def list_items_with_discount(
    discount_percentage: Decimal = Query(..., alias="discountPercentage"),
    session: AsyncSession = Depends(get_session)
):
    """Items whose discount percentage is strictly greater than the given value."""
    return await _list(session, InvoiceItemFilterDTO(min_discount_percentage=discount_percentage))


@router.get("/with-tax", response_model=List[InvoiceItemResponseDTO])
async def list_items_with_tax(
    tax_rate: Decimal = Query(..., alias="taxRate"),
    session: AsyncSession = Depends(get_session)
):
    """Items whose tax rate is strictly greater than the given value."""
    return await _list(session, InvoiceItemFilterDTO(min_tax_rate=tax_rate))


@router.get("/date-range", response_model=List[InvoiceItemResponseDTO])
async def list_items_by_date_range(
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    session: AsyncSession = Depends(get_session)
):
    return await _list(session, InvoiceItemFilterDTO(created_from=start_date, created_to=end_date))


@router.get("/statistics/by-type", response_model=List[ItemStatisticDTO])
async def statistics_by_type(session: AsyncSession = Depends(get_session)):
    """Count and total amount of active items per item type."""
    result = await SummarizeInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).statistics_by_type()
    return result.value


@router.get("/statistics/by-status", response_model=List[ItemStatisticDTO])
async def statistics_by_status(session: AsyncSession = Depends(get_session)):
    """Count and total amount of items per status."""
    result = await SummarizeInvoiceItems(SqlAlchemyInvoiceItemRepository(session)).statistics_by_status()
    return result.value


@router.get("/{item_id}", response_model=InvoiceItemResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_invoice_item(item_id: int, session: AsyncSession = Depends(get_session)):
    result = await GetInvoiceItem(SqlAlchemyInvoiceItemRepository(session)).execute(item_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{item_id}", response_model=InvoiceItemResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_invoice_item(
    item_id: int,
    request: InvoiceItemRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Replace an invoice item's fields and recompute its amounts.

    **Returns:**
    - 200: Item updated
    - 404: Item or target invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateInvoiceItem(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(item_id, _to_command(request))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)
async def delete_invoice_item(item_id: int, session: AsyncSession = Depends(get_session)):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteInvoiceItem(uow, SqlAlchemyInvoiceItemRepository(session)).execute(item_id)
    if result.is_err():
        raise ClientError(result.error)
