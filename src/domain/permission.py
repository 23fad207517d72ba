"""Permission Domain Entity

An atomic (resource, action) authorization grant, addressable by a unique
name and assignable to roles.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import Boolean, String, Text, UniqueConstraint
from src.domain.base import BaseModel, IdType, UtcDateTime, utc_now
from src.domain.links import RolePermissionLink

if TYPE_CHECKING:
    from src.domain.role import Role

NAME_MAX_LENGTH = 100
RESOURCE_MAX_LENGTH = 100
ACTION_MAX_LENGTH = 50


class Permission(BaseModel, table=True):
    """
    Permission - Named (resource, action) grant

    Domain Rules:
    - name is globally unique
    - (resource, action) pair is globally unique
    - Role associations are replaced wholesale, never merged
    """

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint('resource', 'action', name='uq_permissions_resource_action'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique permission identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(NAME_MAX_LENGTH), nullable=False, unique=True),
        description="Unique permission name (e.g., 'Read Users')"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    resource: str = Field(
        sa_column=Column(String(RESOURCE_MAX_LENGTH), nullable=False),
        description="Resource the permission applies to (e.g., 'projects')"
    )

    action: str = Field(
        sa_column=Column(String(ACTION_MAX_LENGTH), nullable=False),
        description="Allowed action (e.g., 'read', 'write')"
    )

    is_active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    roles: List["Role"] = Relationship(
        back_populates="permissions",
        link_model=RolePermissionLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    @property
    def full_permission(self) -> str:
        return f"{self.resource}:{self.action}"
