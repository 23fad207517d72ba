"""Admin Bootstrap Planner

Startup step that guarantees a usable administrator account. Planning is a
pure function of the current state; applying the plan is the job of the
EnsureAdminUser use case.

Steps, in order:
1. RENAME_LEGACY_ADMIN - the legacy-email admin exists and the admin email
   is free: move it to the admin email and set its role string to "admin"
2. CREATE_ADMIN - still no admin user
3. PROMOTE_ADMIN - admin exists but its role string is not "admin"
4. ASSIGN_ADMIN_ROLE - the admin role exists and the admin lacks it

Re-planning against the state produced by applying a plan yields nothing.
"""

from enum import Enum
from typing import FrozenSet, List, Optional
from pydantic import BaseModel, ConfigDict

ADMIN_ROLE_STRING = "admin"


class UserSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    email: str
    role: Optional[str] = None
    role_names: FrozenSet[str] = frozenset()


class AdminBootstrapState(BaseModel):
    model_config = ConfigDict(frozen=True)

    admin_email: str
    legacy_admin_email: Optional[str] = None
    admin_role_name: str
    admin: Optional[UserSnapshot] = None
    legacy_admin: Optional[UserSnapshot] = None
    admin_role_exists: bool = False


class MutationKind(str, Enum):
    RENAME_LEGACY_ADMIN = "rename_legacy_admin"
    CREATE_ADMIN = "create_admin"
    PROMOTE_ADMIN = "promote_admin"
    ASSIGN_ADMIN_ROLE = "assign_admin_role"


class BootstrapMutation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: MutationKind
    user_id: Optional[int] = None


def plan_admin_bootstrap(state: AdminBootstrapState) -> List[BootstrapMutation]:
    """
    Plan the mutations needed to reach the desired admin state

    A user_id of None on a mutation refers to the admin created by an
    earlier CREATE_ADMIN step of the same plan.
    """
    mutations: List[BootstrapMutation] = []
    admin = state.admin

    legacy = state.legacy_admin
    if legacy is not None and admin is None and legacy.email != state.admin_email:
        mutations.append(BootstrapMutation(kind=MutationKind.RENAME_LEGACY_ADMIN, user_id=legacy.id))
        admin = UserSnapshot(
            id=legacy.id,
            email=state.admin_email,
            role=ADMIN_ROLE_STRING,
            role_names=legacy.role_names,
        )

    if admin is None:
        mutations.append(BootstrapMutation(kind=MutationKind.CREATE_ADMIN))
        admin = UserSnapshot(email=state.admin_email, role=ADMIN_ROLE_STRING)
    elif admin.role != ADMIN_ROLE_STRING:
        mutations.append(BootstrapMutation(kind=MutationKind.PROMOTE_ADMIN, user_id=admin.id))

    if state.admin_role_exists and state.admin_role_name not in admin.role_names:
        mutations.append(BootstrapMutation(kind=MutationKind.ASSIGN_ADMIN_ROLE, user_id=admin.id))

    return mutations
