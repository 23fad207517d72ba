"""Invoice item use cases"""
from .create_invoice_item import CreateInvoiceItem
from .update_invoice_item import UpdateInvoiceItem
from .delete_invoice_item import DeleteInvoiceItem
from .get_invoice_item import GetInvoiceItem
from .list_invoice_items import ListInvoiceItems
from .summarize_invoice_items import SummarizeInvoiceItems
from .dtos import (
    ClientTotalDTO,
    InvoiceItemCommandDTO,
    InvoiceItemResponseDTO,
    InvoiceItemFilterDTO,
    InvoiceTotalsDTO,
    ItemStatisticDTO,
)

__all__ = [
    "CreateInvoiceItem",
    "UpdateInvoiceItem",
    "DeleteInvoiceItem",
    "GetInvoiceItem",
    "ListInvoiceItems",
    "SummarizeInvoiceItems",
    "InvoiceItemCommandDTO",
    "InvoiceItemResponseDTO",
    "InvoiceItemFilterDTO",
    "InvoiceTotalsDTO",
    "ClientTotalDTO",
    "ItemStatisticDTO",
]
