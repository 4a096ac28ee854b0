"""Role-hierarchy authorization guards for admin user management."""
