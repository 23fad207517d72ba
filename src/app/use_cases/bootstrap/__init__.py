"""Admin bootstrap use case"""
from .ensure_admin_user import EnsureAdminUser
from .dtos import AdminSettingsDTO, AdminBootstrapResultDTO

__all__ = [
    "EnsureAdminUser",
    "AdminSettingsDTO",
    "AdminBootstrapResultDTO",
]
