"""Role-hierarchy authorization guards.

Every guard is a pure function of its inputs: it never raises, never logs
and never touches storage. A denial is reported through the returned
GuardResult, and it is up to the caller to turn it into an error response.
"""

from typing import Any, Mapping, Optional, Union

from roleguard.auth.constants import FOUNDER_ROLE, NOT_FOUND_RANK, ROLE_HIERARCHY
from roleguard.auth.models import Actor, GuardErrorCode, GuardResult, TargetUser
from roleguard.auth.roles import get_role_rank, normalize_role

ActorInput = Union[Actor, Mapping[str, Any], None]
TargetInput = Union[TargetUser, Mapping[str, Any], None]


def _as_snapshot(model, value: Any):
    """Coerce an actor or target into `model`.

    Mappings are read field by field. Ids that are not int or str and roles
    that are not str are dropped. Anything else becomes None.
    """
    if value is None or isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        return None

    user_id = value.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, (int, str)):
        user_id = None
    role = value.get("role")
    if not isinstance(role, str):
        role = None
    return model(id=user_id, role=role)


def assert_valid_role(role: Any) -> GuardResult:
    """Deny with INVALID_ROLE unless `role` names a member of ROLE_HIERARCHY."""
    if not role or not isinstance(role, str):
        return GuardResult.deny(
            GuardErrorCode.INVALID_ROLE, "Role must be a non-empty string"
        )

    normalized_role = normalize_role(role)
    if normalized_role == "":
        return GuardResult.deny(GuardErrorCode.INVALID_ROLE, "Role cannot be empty")

    if normalized_role not in ROLE_HIERARCHY:
        return GuardResult.deny(
            GuardErrorCode.INVALID_ROLE,
            f'Role "{normalized_role}" is not in the role hierarchy. '
            f"Valid roles: {', '.join(ROLE_HIERARCHY)}",
        )

    return GuardResult.allow()


def assert_can_assign_role(
    actor: ActorInput, target_user: TargetInput, new_role: Any
) -> GuardResult:
    """Decide whether `actor` may give `new_role` to `target_user`.

    Rules, checked in order:
    1. The actor must be present and carry an id.
    2. The new role must be a member of the hierarchy.
    3. The actor must hold a known role.
    4. When acting on someone else, the actor must strictly outrank the
       target's current role. A missing or unknown target role ranks below
       every known role.
    5. The actor cannot downgrade themselves. Re-assigning their current
       role to themselves is a no-op and is allowed straight away.
    6. The actor must strictly outrank the role being assigned.

    A self-assignment to a more authoritative role passes rule 5 and then
    always fails rule 6, so the only self-assignment that succeeds is the
    no-op.
    """
    actor = _as_snapshot(Actor, actor)
    target_user = _as_snapshot(TargetUser, target_user)
    if actor is None or not actor.id:
        return GuardResult.deny(GuardErrorCode.ACTOR_REQUIRED, "Actor is required")

    role_validation = assert_valid_role(new_role)
    if not role_validation.allowed:
        return role_validation

    normalized_new_role = normalize_role(new_role)

    if not actor.role or not isinstance(actor.role, str):
        return GuardResult.deny(
            GuardErrorCode.INSUFFICIENT_ROLE_LEVEL, "Actor must have a valid role"
        )

    normalized_actor_role = normalize_role(actor.role)
    actor_rank = get_role_rank(normalized_actor_role)
    if actor_rank == NOT_FOUND_RANK:
        return GuardResult.deny(
            GuardErrorCode.INSUFFICIENT_ROLE_LEVEL,
            f'Actor role "{normalized_actor_role}" is not in the role hierarchy',
        )

    target_id = target_user.id if target_user is not None else None
    normalized_target_role = (
        normalize_role(target_user.role) if target_user is not None else None
    ) or ""
    target_rank = get_role_rank(normalized_target_role)
    effective_target_rank = (
        len(ROLE_HIERARCHY) if target_rank == NOT_FOUND_RANK else target_rank
    )

    new_role_rank = get_role_rank(normalized_new_role)

    if actor.id == target_id:
        if new_role_rank > actor_rank:
            return GuardResult.deny(
                GuardErrorCode.SELF_ROLE_CHANGE_NOT_ALLOWED,
                f'Actor cannot downgrade themselves from "{normalized_actor_role}" '
                f'to "{normalized_new_role}". This would remove their ability '
                "to manage roles.",
            )

        if new_role_rank == actor_rank and normalized_new_role == normalized_actor_role:
            return GuardResult.allow()

        # Self-upgrades fall through to the final rank check.
    elif actor_rank >= effective_target_rank:
        return GuardResult.deny(
            GuardErrorCode.INSUFFICIENT_ROLE_LEVEL,
            f'Actor with role "{normalized_actor_role}" (rank {actor_rank}) cannot '
            f'modify user with role "{normalized_target_role or "none"}" '
            f"(rank {effective_target_rank}). Actor must have a higher rank than "
            "the target user's current role.",
        )

    if actor_rank >= new_role_rank:
        return GuardResult.deny(
            GuardErrorCode.INSUFFICIENT_ROLE_LEVEL,
            f'Actor with role "{normalized_actor_role}" (rank {actor_rank}) cannot '
            f'assign role "{normalized_new_role}" (rank {new_role_rank}). Actor '
            "must have a higher rank than the role being assigned.",
        )

    return GuardResult.allow()


def _parse_user_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def assert_can_modify_user(
    actor: ActorInput, target_user_id: Union[int, str, float, None]
) -> GuardResult:
    """Block admins from mutating their own account through admin actions."""
    actor = _as_snapshot(Actor, actor)
    if actor is None or not actor.id:
        return GuardResult.deny(
            GuardErrorCode.ACTOR_REQUIRED,
            "Actor user is required to perform this action",
        )

    actor_id = _parse_user_id(actor.id)
    target_id = _parse_user_id(target_user_id)
    if actor_id is None or target_id is None:
        return GuardResult.deny(
            GuardErrorCode.ACTOR_REQUIRED, "Invalid user ID provided"
        )

    if actor_id == target_id:
        return GuardResult.deny(
            GuardErrorCode.SELF_MODIFICATION_NOT_ALLOWED,
            "Users cannot modify their own account through admin actions",
        )

    return GuardResult.allow()


def assert_founder(actor: ActorInput) -> GuardResult:
    actor = _as_snapshot(Actor, actor)
    if actor is None or normalize_role(actor.role) != FOUNDER_ROLE:
        return GuardResult.deny(
            GuardErrorCode.FOUNDER_ONLY, "Founder access required"
        )

    return GuardResult.allow()
