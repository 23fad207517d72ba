"""Integration tests for the admin bootstrap against SQLite"""

import pytest
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.domain.admin_bootstrap import MutationKind
from src.domain.role import Role
from src.domain.user import User
from src.worker.bootstrap_admin import bootstrap_admin


class BootstrapConfig:
    ADMIN_EMAIL = "admin@xperiecia.com"
    LEGACY_ADMIN_EMAIL = "admin@codexcore.com"
    ADMIN_NAME = "Administrador"
    ADMIN_ROLE_NAME = "Administrador"
    ADMIN_PASSWORD_HASH = "$2a$10$hash"
    ADMIN_PHONE = "123456789"


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


class TestBootstrapAdmin:
    @pytest.mark.asyncio
    async def test_second_run_changes_nothing(self, session_factory, db_session):
        db_session.add(Role(name="Administrador"))
        await db_session.commit()

        first = await bootstrap_admin(session_factory, BootstrapConfig)
        second = await bootstrap_admin(session_factory, BootstrapConfig)

        assert first.applied == [MutationKind.CREATE_ADMIN, MutationKind.ASSIGN_ADMIN_ROLE]
        assert second.applied == []
        assert second.admin_id == first.admin_id

        async with session_factory() as session:
            admin = await SqlAlchemyUserRepository(session).get_by_email("admin@xperiecia.com")
            assert admin.role == "admin"
            assert admin.has_role("Administrador")

    @pytest.mark.asyncio
    async def test_legacy_admin_is_migrated(self, session_factory, db_session):
        db_session.add(User(name="Old admin", email="admin@codexcore.com", role="user"))
        await db_session.commit()

        summary = await bootstrap_admin(session_factory, BootstrapConfig)

        assert summary.applied == [MutationKind.RENAME_LEGACY_ADMIN]
        async with session_factory() as session:
            repo = SqlAlchemyUserRepository(session)
            assert await repo.get_by_email("admin@codexcore.com") is None
            migrated = await repo.get_by_email("admin@xperiecia.com")
            assert migrated.name == "Old admin"
            assert migrated.role == "admin"
