from roleguard.auth.constants import FOUNDER_ROLE, NOT_FOUND_RANK, ROLE_HIERARCHY
from roleguard.auth.roles import get_role_rank, normalize_role
from roleguard.auth.guards import (
    assert_valid_role,
    assert_can_assign_role,
    assert_can_modify_user,
    assert_founder,
)
from roleguard.auth.models import Actor, TargetUser, GuardErrorCode, GuardResult
from roleguard.auth.rbac import (
    raise_for_denial,
    check_role_assignment,
    require_founder,
    require_modifiable_user,
)

__all__ = [
    "FOUNDER_ROLE",
    "NOT_FOUND_RANK",
    "ROLE_HIERARCHY",
    "get_role_rank",
    "normalize_role",
    "assert_valid_role",
    "assert_can_assign_role",
    "assert_can_modify_user",
    "assert_founder",
    "Actor",
    "TargetUser",
    "GuardErrorCode",
    "GuardResult",
    "raise_for_denial",
    "check_role_assignment",
    "require_founder",
    "require_modifiable_user",
]
