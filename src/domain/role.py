"""Role Domain Entity

A named bundle of permissions assignable to users.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import Boolean, String, Text
from src.domain.base import BaseModel, IdType, UtcDateTime, utc_now
from src.domain.links import RolePermissionLink, UserRoleLink

if TYPE_CHECKING:
    from src.domain.permission import Permission
    from src.domain.user import User

ROLE_NAME_MAX_LENGTH = 100


class Role(BaseModel, table=True):
    __tablename__ = "roles"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )

    name: str = Field(
        sa_column=Column(String(ROLE_NAME_MAX_LENGTH), nullable=False, unique=True),
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    is_active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    permissions: List["Permission"] = Relationship(
        back_populates="roles",
        link_model=RolePermissionLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    users: List["User"] = Relationship(
        back_populates="roles",
        link_model=UserRoleLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )
