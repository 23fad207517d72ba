"""Admin Bootstrap Worker

Runs the EnsureAdminUser step against the configured database. The API
calls bootstrap_admin() from its lifespan; it can also be run on its own:

    python -m src.worker.bootstrap_admin
"""

import asyncio
import logging
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.role_repository import SqlAlchemyRoleRepository
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.bootstrap import (
    AdminBootstrapResultDTO,
    AdminSettingsDTO,
    EnsureAdminUser,
)

logger = logging.getLogger(__name__)


async def bootstrap_admin(session_factory, config) -> AdminBootstrapResultDTO:
    """
    Ensure the administrator account in a fresh session

    Args:
        session_factory: Callable returning an AsyncSession context manager
        config: ApplicationConfig-like object with the ADMIN_* settings

    Returns:
        AdminBootstrapResultDTO listing the applied mutations
    """
    settings = AdminSettingsDTO.from_config(config)
    logger.info(f"Checking administrator account {settings.admin_email}")

    async with session_factory() as session:
        use_case = EnsureAdminUser(
            uow=SqlAlchemyUnitOfWork(session),
            user_repo=SqlAlchemyUserRepository(session),
            role_repo=SqlAlchemyRoleRepository(session),
            settings=settings,
        )
        result = await use_case.execute()
        summary = result.value

    logger.info(
        f"Admin bootstrap complete: "
        f"{', '.join(kind.value for kind in summary.applied) or 'no changes'}"
    )
    return summary


async def main():
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    try:
        summary = await bootstrap_admin(session_factory, ApplicationConfig)
        print("Admin bootstrap complete:")
        print(f"  Admin: {summary.admin_email} (id={summary.admin_id})")
        print(f"  Applied: {[kind.value for kind in summary.applied]}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
