"""Data Transfer Objects for Role Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.role import Role


class RoleCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a role

    permission_ids replaces the permission set wholesale when given; None
    leaves the current permissions untouched on update.
    """

    name: Optional[str] = Field(default=None, description="Unique role name (max 100)")
    description: Optional[str] = Field(default=None, description="Free-text description")
    is_active: bool = Field(default=True, description="Whether the role is active")
    permission_ids: Optional[List[int]] = Field(default=None, description="Permissions granted by this role")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "accountant",
                "description": "Manages invoices",
                "is_active": True,
                "permission_ids": [1, 4]
            }
        }


class RoleResponseDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    permission_ids: List[int] = Field(default_factory=list)
    permission_names: List[str] = Field(default_factory=list)
    user_count: int = 0

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponseDTO":
        permissions = sorted(role.permissions or [], key=lambda permission: permission.id)
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            is_active=role.is_active,
            created_at=role.created_at,
            updated_at=role.updated_at,
            permission_ids=[permission.id for permission in permissions],
            permission_names=[permission.name for permission in permissions],
            user_count=len(role.users or []),
        )
