"""Permission Repository Interface

Defines the contract for permission persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.permission import Permission


class PermissionRepository(ABC):
    """
    Repository interface for Permission persistence

    Uniqueness checks accept exclude_id so that an update can be checked
    against every record except the one being updated.
    """

    @abstractmethod
    async def get_by_id(self, permission_id: int) -> Optional[Permission]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Permission]:
        pass

    @abstractmethod
    async def get_by_resource_and_action(self, resource: str, action: str) -> Optional[Permission]:
        pass

    @abstractmethod
    async def get_all_by_ids(self, permission_ids: List[int]) -> List[Permission]:
        """
        Retrieve the permissions whose id is in the list

        Unknown ids are ignored (partial match).
        """
        pass

    @abstractmethod
    async def exists_by_id(self, permission_id: int) -> bool:
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def exists_by_resource_and_action(
        self, resource: str, action: str, exclude_id: Optional[int] = None
    ) -> bool:
        pass

    @abstractmethod
    async def create(self, permission: Permission) -> Permission:
        pass

    @abstractmethod
    async def update(self, permission: Permission) -> Permission:
        pass

    @abstractmethod
    async def delete_by_id(self, permission_id: int) -> None:
        """Delete the permission and its role links"""
        pass

    @abstractmethod
    async def list_permissions(
        self,
        active_only: bool = False,
        role_id: Optional[int] = None,
        resource: Optional[str] = None,
        action: Optional[str] = None,
        name_contains: Optional[str] = None,
    ) -> List[Permission]:
        """
        List permissions matching every given filter

        Args:
            active_only: Only is_active permissions
            role_id: Permissions linked to this role
            resource: Exact resource
            action: Exact action
            name_contains: Substring of name

        Returns:
            Matching permissions ordered by id
        """
        pass

    @abstractmethod
    async def list_active_resources(self) -> List[str]:
        pass

    @abstractmethod
    async def list_active_actions(self) -> List[str]:
        pass

    @abstractmethod
    async def count_active(self) -> int:
        pass
