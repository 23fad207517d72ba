"""Unit tests for the admin bootstrap planner"""

from src.domain.admin_bootstrap import (
    AdminBootstrapState,
    BootstrapMutation,
    MutationKind,
    UserSnapshot,
    plan_admin_bootstrap,
)

ADMIN_EMAIL = "admin@xperiecia.com"
LEGACY_EMAIL = "admin@codexcore.com"
ROLE_NAME = "Administrador"


def make_state(**overrides):
    values = dict(
        admin_email=ADMIN_EMAIL,
        legacy_admin_email=LEGACY_EMAIL,
        admin_role_name=ROLE_NAME,
        admin=None,
        legacy_admin=None,
        admin_role_exists=True,
    )
    values.update(overrides)
    return AdminBootstrapState(**values)


def kinds(plan):
    return [mutation.kind for mutation in plan]


class TestPlanAdminBootstrap:
    def test_empty_database_creates_admin_and_assigns_role(self):
        plan = plan_admin_bootstrap(make_state())

        assert plan == [
            BootstrapMutation(kind=MutationKind.CREATE_ADMIN),
            BootstrapMutation(kind=MutationKind.ASSIGN_ADMIN_ROLE),
        ]

    def test_no_role_in_store_only_creates(self):
        plan = plan_admin_bootstrap(make_state(admin_role_exists=False))

        assert kinds(plan) == [MutationKind.CREATE_ADMIN]

    def test_legacy_admin_is_renamed_not_recreated(self):
        legacy = UserSnapshot(id=7, email=LEGACY_EMAIL, role="user")

        plan = plan_admin_bootstrap(make_state(legacy_admin=legacy))

        assert kinds(plan) == [MutationKind.RENAME_LEGACY_ADMIN, MutationKind.ASSIGN_ADMIN_ROLE]
        assert all(mutation.user_id == 7 for mutation in plan)

    def test_legacy_admin_with_role_only_renamed(self):
        legacy = UserSnapshot(id=7, email=LEGACY_EMAIL, role="admin", role_names=frozenset({ROLE_NAME}))

        plan = plan_admin_bootstrap(make_state(legacy_admin=legacy))

        assert kinds(plan) == [MutationKind.RENAME_LEGACY_ADMIN]

    def test_legacy_admin_left_alone_when_admin_email_taken(self):
        legacy = UserSnapshot(id=7, email=LEGACY_EMAIL, role="user")
        admin = UserSnapshot(id=1, email=ADMIN_EMAIL, role="admin", role_names=frozenset({ROLE_NAME}))

        plan = plan_admin_bootstrap(make_state(admin=admin, legacy_admin=legacy))

        assert plan == []

    def test_existing_admin_with_wrong_role_is_promoted(self):
        admin = UserSnapshot(id=1, email=ADMIN_EMAIL, role="consultant", role_names=frozenset({ROLE_NAME}))

        plan = plan_admin_bootstrap(make_state(admin=admin))

        assert plan == [BootstrapMutation(kind=MutationKind.PROMOTE_ADMIN, user_id=1)]

    def test_existing_admin_missing_role_gets_it(self):
        admin = UserSnapshot(id=1, email=ADMIN_EMAIL, role="admin", role_names=frozenset({"Viewer"}))

        plan = plan_admin_bootstrap(make_state(admin=admin))

        assert plan == [BootstrapMutation(kind=MutationKind.ASSIGN_ADMIN_ROLE, user_id=1)]

    def test_without_legacy_email_setting(self):
        plan = plan_admin_bootstrap(make_state(legacy_admin_email=None, admin_role_exists=False))

        assert kinds(plan) == [MutationKind.CREATE_ADMIN]

    def test_plan_is_idempotent(self):
        """Replanning against the state the plan produces yields nothing"""
        legacy = UserSnapshot(id=7, email=LEGACY_EMAIL, role="user")
        plan = plan_admin_bootstrap(make_state(legacy_admin=legacy))
        assert plan

        after = make_state(
            admin=UserSnapshot(id=7, email=ADMIN_EMAIL, role="admin", role_names=frozenset({ROLE_NAME})),
            legacy_admin=None,
        )

        assert plan_admin_bootstrap(after) == []
