# Roles ordered from highest to lowest authority. The position of a role
# is its rank: 0 is the founder, larger numbers carry less authority.
ROLE_HIERARCHY = (
    "founder",
    "admin",
    "support",
    "viewer",
)

FOUNDER_ROLE = ROLE_HIERARCHY[0]

# Rank returned for empty, non-string or unknown roles.
NOT_FOUND_RANK = -1
