"""Permission registry use cases"""
from .create_permission import CreatePermission
from .update_permission import UpdatePermission
from .delete_permission import DeletePermission
from .get_permission import GetPermission
from .list_permissions import ListPermissions
from .dtos import PermissionCommandDTO, PermissionResponseDTO, PermissionFilterDTO

__all__ = [
    "CreatePermission",
    "UpdatePermission",
    "DeletePermission",
    "GetPermission",
    "ListPermissions",
    "PermissionCommandDTO",
    "PermissionResponseDTO",
    "PermissionFilterDTO",
]
