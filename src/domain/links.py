"""Many-to-many association tables

Plain link rows with no extra columns: role <-> permission and
user <-> role.
"""

from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey
from src.domain.base import BaseModel, IdType


class RolePermissionLink(BaseModel, table=True):
    __tablename__ = "role_permissions"

    role_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    )

    permission_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True),
    )


class UserRoleLink(BaseModel, table=True):
    __tablename__ = "user_roles"

    user_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    )

    role_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    )
