"""EnsureAdminUser Use Case

Startup step that brings the administrator account to its desired state.
The current state is loaded from the user and role stores, turned into a
plan by plan_admin_bootstrap and applied inside a single unit of work.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.role_repository import RoleRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.admin_bootstrap import (
    ADMIN_ROLE_STRING,
    AdminBootstrapState,
    MutationKind,
    UserSnapshot,
    plan_admin_bootstrap,
)
from src.domain.user import User
from .dtos import AdminSettingsDTO, AdminBootstrapResultDTO

logger = logging.getLogger(__name__)


def _snapshot(user: Optional[User]) -> Optional[UserSnapshot]:
    if user is None:
        return None
    return UserSnapshot(
        id=user.id,
        email=user.email,
        role=user.role,
        role_names=frozenset(role.name for role in user.roles),
    )


class EnsureAdminUser:
    """
    Use Case: Ensure the administrator account

    Business Rules:
    1. A user under the legacy admin email is moved to the admin email,
       unless that email is already taken
    2. An admin user is created when none exists
    3. The admin's legacy role string is forced to "admin"
    4. The admin role is assigned when it exists and the admin lacks it
    5. Running it again changes nothing
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        settings: AdminSettingsDTO,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.role_repo = role_repo
        self.settings = settings

    async def execute(self) -> Result[AdminBootstrapResultDTO]:
        settings = self.settings
        try:
            admin = await self.user_repo.get_by_email(settings.admin_email)
            legacy_admin = None
            if settings.legacy_admin_email:
                legacy_admin = await self.user_repo.get_by_email(settings.legacy_admin_email)
            admin_role = await self.role_repo.get_by_name(settings.admin_role_name)

            state = AdminBootstrapState(
                admin_email=settings.admin_email,
                legacy_admin_email=settings.legacy_admin_email,
                admin_role_name=settings.admin_role_name,
                admin=_snapshot(admin),
                legacy_admin=_snapshot(legacy_admin),
                admin_role_exists=admin_role is not None,
            )
            plan = plan_admin_bootstrap(state)

            if admin_role is None:
                logger.warning(f"Role '{settings.admin_role_name}' not found, skipping role assignment")

            for mutation in plan:
                if mutation.kind == MutationKind.RENAME_LEGACY_ADMIN:
                    legacy_admin.email = settings.admin_email
                    legacy_admin.role = ADMIN_ROLE_STRING
                    admin = await self.user_repo.update(legacy_admin)
                    logger.info(
                        f"Moved legacy admin {settings.legacy_admin_email} to {settings.admin_email}"
                    )

                elif mutation.kind == MutationKind.CREATE_ADMIN:
                    if not settings.admin_password_hash:
                        logger.warning("Creating admin user without a password hash")
                    admin = await self.user_repo.create(
                        User(
                            name=settings.admin_name,
                            email=settings.admin_email,
                            password_hash=settings.admin_password_hash,
                            role=ADMIN_ROLE_STRING,
                            phone=settings.admin_phone,
                            status="active",
                        )
                    )
                    logger.info(f"Created admin user {settings.admin_email}")

                elif mutation.kind == MutationKind.PROMOTE_ADMIN:
                    admin.role = ADMIN_ROLE_STRING
                    admin = await self.user_repo.update(admin)
                    logger.info(f"Set role 'admin' on existing user {settings.admin_email}")

                elif mutation.kind == MutationKind.ASSIGN_ADMIN_ROLE:
                    admin.roles = list(admin.roles) + [admin_role]
                    admin = await self.user_repo.update(admin)
                    logger.info(f"Assigned role '{settings.admin_role_name}' to {settings.admin_email}")

            await self.uow.commit()

            if not plan:
                logger.info(f"Admin user {settings.admin_email} already up to date")

            return Return.ok(
                AdminBootstrapResultDTO(
                    admin_id=admin.id if admin is not None else None,
                    admin_email=settings.admin_email,
                    applied=[mutation.kind for mutation in plan],
                )
            )

        except Exception:
            await self.uow.rollback()
            raise
