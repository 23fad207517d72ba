"""Request schemas for the Permission and Role APIs

Blank and over-long names are reported by the use cases as 400
ValidationError responses, so these schemas only describe the shape.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class PermissionRequestSchema(BaseModel):
    name: Optional[str] = Field(default=None, description="Unique permission name")
    description: Optional[str] = None
    resource: Optional[str] = Field(default=None, description="Resource, e.g. 'users'")
    action: Optional[str] = Field(default=None, description="Action, e.g. 'read'")
    is_active: bool = True
    role_ids: Optional[List[int]] = Field(
        default=None,
        description="Replaces the role set; omit to keep current roles",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Read Users",
                "resource": "users",
                "action": "read",
                "role_ids": [1]
            }
        }


class RoleRequestSchema(BaseModel):
    name: Optional[str] = Field(default=None, description="Unique role name")
    description: Optional[str] = None
    is_active: bool = True
    permission_ids: Optional[List[int]] = Field(
        default=None,
        description="Replaces the permission set; omit to keep current permissions",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "accountant",
                "description": "Manages invoices",
                "permission_ids": [1, 2]
            }
        }
