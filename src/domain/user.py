"""User Domain Entity

Only the fields the admin bootstrap needs: identity, credentials, the
legacy string role and the role associations.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import String
from src.domain.base import BaseModel, IdType, UtcDateTime, utc_now
from src.domain.links import UserRoleLink

if TYPE_CHECKING:
    from src.domain.role import Role


class User(BaseModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))

    email: str = Field(sa_column=Column(String(255), nullable=False, unique=True))

    password_hash: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    role: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Legacy single role string (e.g., 'admin')"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    status: str = Field(
        default="active",
        sa_column=Column(String(50), nullable=False, default="active"),
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=UtcDateTime)

    roles: List["Role"] = Relationship(
        back_populates="users",
        link_model=UserRoleLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    def has_role(self, role_name: str) -> bool:
        return any(role.name == role_name for role in self.roles)
