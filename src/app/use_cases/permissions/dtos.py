"""Data Transfer Objects for Permission Use Cases

Pydantic models for command inputs and response outputs. Field rules
(blank, length, uniqueness) are checked by the use cases so that they are
reported as ValidationError results.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.permission import Permission


class PermissionCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a permission

    role_ids replaces the role set wholesale when given; None leaves the
    current roles untouched on update.
    """

    name: Optional[str] = Field(default=None, description="Unique permission name (max 100)")
    description: Optional[str] = Field(default=None, description="Free-text description")
    resource: Optional[str] = Field(default=None, description="Resource name (max 100)")
    action: Optional[str] = Field(default=None, description="Action name (max 50)")
    is_active: bool = Field(default=True, description="Whether the permission is active")
    role_ids: Optional[List[int]] = Field(default=None, description="Roles holding this permission")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Read Users",
                "description": "List and view users",
                "resource": "users",
                "action": "read",
                "is_active": True,
                "role_ids": [1, 2]
            }
        }


class PermissionResponseDTO(BaseModel):
    """Permission with its role associations"""

    id: int
    name: str
    description: Optional[str] = None
    resource: str
    action: str
    full_permission: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    role_ids: List[int] = Field(default_factory=list)
    role_names: List[str] = Field(default_factory=list)
    role_count: int = 0

    @classmethod
    def from_entity(cls, permission: Permission) -> "PermissionResponseDTO":
        roles = sorted(permission.roles or [], key=lambda role: role.id)
        return cls(
            id=permission.id,
            name=permission.name,
            description=permission.description,
            resource=permission.resource,
            action=permission.action,
            full_permission=permission.full_permission,
            is_active=permission.is_active,
            created_at=permission.created_at,
            updated_at=permission.updated_at,
            role_ids=[role.id for role in roles],
            role_names=[role.name for role in roles],
            role_count=len(roles),
        )


class PermissionFilterDTO(BaseModel):
    """Filters for listing permissions; every filter that is set must match"""

    active_only: bool = False
    role_id: Optional[int] = None
    resource: Optional[str] = None
    action: Optional[str] = None
    name_contains: Optional[str] = None
