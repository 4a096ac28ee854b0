from typing import Any, Optional

from roleguard.auth.constants import NOT_FOUND_RANK, ROLE_HIERARCHY


def normalize_role(role: Any) -> Optional[str]:
    """Lower-case and trim a role name. Returns None for non-string input."""
    if not isinstance(role, str):
        return None
    return role.strip().lower()


def get_role_rank(role: Any) -> int:
    """Return the rank of a role in ROLE_HIERARCHY.

    Lower rank means more authority. Empty, non-string and unknown
    roles resolve to NOT_FOUND_RANK.
    """
    normalized = normalize_role(role)
    if not normalized:
        return NOT_FOUND_RANK

    try:
        return ROLE_HIERARCHY.index(normalized)
    except ValueError:
        return NOT_FOUND_RANK


def is_known_role(role: Any) -> bool:
    return get_role_rank(role) != NOT_FOUND_RANK
