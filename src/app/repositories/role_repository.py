"""Role Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.role import Role


class RoleRepository(ABC):
    @abstractmethod
    async def get_by_id(self, role_id: int) -> Optional[Role]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        pass

    @abstractmethod
    async def get_all_by_ids(self, role_ids: List[int]) -> List[Role]:
        """
        Retrieve the roles whose id is in the list

        Unknown ids are ignored (partial match).
        """
        pass

    @abstractmethod
    async def exists_by_id(self, role_id: int) -> bool:
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def list_roles(
        self,
        active_only: bool = False,
        permission_id: Optional[int] = None,
        user_id: Optional[int] = None,
        name_contains: Optional[str] = None,
    ) -> List[Role]:
        """
        List roles matching every given filter

        Args:
            active_only: Only is_active roles
            permission_id: Roles granting this permission
            user_id: Roles assigned to this user
            name_contains: Substring of name

        Returns:
            Matching roles ordered by id
        """
        pass

    @abstractmethod
    async def count_active(self) -> int:
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def update(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def delete_by_id(self, role_id: int) -> None:
        pass
