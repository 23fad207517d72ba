"""Data Transfer Objects for the admin bootstrap"""

from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.admin_bootstrap import MutationKind


class AdminSettingsDTO(BaseModel):
    """Desired administrator account, usually read from ApplicationConfig"""

    admin_email: str
    legacy_admin_email: Optional[str] = None
    admin_name: str = "Administrador"
    admin_role_name: str = "Administrador"
    admin_password_hash: Optional[str] = Field(
        default=None,
        description="Precomputed password hash stored as-is on a newly created admin",
    )
    admin_phone: Optional[str] = None

    @classmethod
    def from_config(cls, config) -> "AdminSettingsDTO":
        # Blank values in env.yaml mean unset
        return cls(
            admin_email=config.ADMIN_EMAIL,
            legacy_admin_email=config.LEGACY_ADMIN_EMAIL or None,
            admin_name=config.ADMIN_NAME,
            admin_role_name=config.ADMIN_ROLE_NAME,
            admin_password_hash=config.ADMIN_PASSWORD_HASH or None,
            admin_phone=config.ADMIN_PHONE or None,
        )


class AdminBootstrapResultDTO(BaseModel):
    admin_id: Optional[int] = None
    admin_email: str
    applied: List[MutationKind] = Field(default_factory=list)
