from .base import BaseModel, IdType
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem, ItemType, ItemStatus
from .invoice_item_calculator import ItemTotals, calculate_item_totals
from .links import RolePermissionLink, UserRoleLink
from .permission import Permission
from .role import Role
from .user import User

__all__ = [
    "BaseModel",
    "IdType",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "ItemType",
    "ItemStatus",
    "ItemTotals",
    "calculate_item_totals",
    "RolePermissionLink",
    "UserRoleLink",
    "Permission",
    "Role",
    "User",
]
