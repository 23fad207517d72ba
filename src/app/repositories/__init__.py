from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .permission_repository import PermissionRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "InvoiceRepository",
    "InvoiceItemRepository",
    "PermissionRepository",
    "RoleRepository",
    "UserRepository",
]
