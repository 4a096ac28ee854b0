import pytest

from roleguard.auth.constants import FOUNDER_ROLE, NOT_FOUND_RANK, ROLE_HIERARCHY
from roleguard.auth.roles import get_role_rank, is_known_role, normalize_role


class TestRoleHierarchy:
    def test_order_is_highest_first(self):
        assert ROLE_HIERARCHY == ("founder", "admin", "support", "viewer")
        assert FOUNDER_ROLE == "founder"

    def test_hierarchy_is_immutable(self):
        with pytest.raises(TypeError):
            ROLE_HIERARCHY[0] = "admin"
        assert not hasattr(ROLE_HIERARCHY, "append")


class TestGetRoleRank:
    def test_every_member_ranks_at_its_index(self):
        for index, role in enumerate(ROLE_HIERARCHY):
            assert get_role_rank(role) == index

    def test_case_and_whitespace_insensitive(self):
        assert get_role_rank(" Admin ") == get_role_rank("admin") == 1
        assert get_role_rank("VIEWER\n") == 3

    @pytest.mark.parametrize(
        "role", [None, "", "   ", "owner", "Superadmin", "admins", "found", 0, 1, ["admin"]]
    )
    def test_unknown_roles_return_sentinel(self, role):
        assert get_role_rank(role) == NOT_FOUND_RANK

    def test_is_deterministic(self):
        assert get_role_rank("support") == get_role_rank("support") == 2


class TestNormalizeRole:
    def test_lowercases_and_trims(self):
        assert normalize_role("  FoUnDeR ") == "founder"

    def test_non_string_is_none(self):
        assert normalize_role(None) is None
        assert normalize_role(3) is None

    def test_is_known_role(self):
        assert is_known_role("Support")
        assert not is_known_role("guest")
