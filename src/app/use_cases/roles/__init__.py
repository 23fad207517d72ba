"""Role management use cases"""
from .create_role import CreateRole
from .update_role import UpdateRole
from .delete_role import DeleteRole
from .get_role import GetRole, ListRoles
from .role_permissions import AddPermissionToRole, RemovePermissionFromRole
from .dtos import RoleCommandDTO, RoleResponseDTO

__all__ = [
    "CreateRole",
    "UpdateRole",
    "DeleteRole",
    "GetRole",
    "ListRoles",
    "AddPermissionToRole",
    "RemovePermissionFromRole",
    "RoleCommandDTO",
    "RoleResponseDTO",
]
