from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .permission_repository import SqlAlchemyPermissionRepository
from .role_repository import SqlAlchemyRoleRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyPermissionRepository",
    "SqlAlchemyRoleRepository",
    "SqlAlchemyUserRepository",
]
