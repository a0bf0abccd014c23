from typing import FrozenSet

# Canonical role names
ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super_admin"

# Capabilities carried by an authenticated caller
MANAGE_CATALOG = "manage_catalog"
MANAGE_ORDERS = "manage_orders"
VIEW_STATS = "view_stats"
UPLOAD_IMAGES = "upload_images"
MANAGE_ADMINS = "manage_admins"

_ADMIN_CAPABILITIES = frozenset({MANAGE_CATALOG, MANAGE_ORDERS, VIEW_STATS, UPLOAD_IMAGES})

ROLE_CAPABILITIES = {
    ROLE_ADMIN: _ADMIN_CAPABILITIES,
    ROLE_SUPER_ADMIN: _ADMIN_CAPABILITIES | {MANAGE_ADMINS},
}


def capabilities_for_role(role: str) -> FrozenSet[str]:
    """Return the capability set granted to ``role`` (empty for unknown roles)."""
    return ROLE_CAPABILITIES.get(role, frozenset())


def caller_capabilities(user) -> FrozenSet[str]:
    """Capabilities of the caller attached to a request; anonymous callers have none."""
    if not getattr(user, "is_authenticated", False):
        return frozenset()
    capabilities = getattr(user, "capabilities", None)
    if capabilities is None:
        return capabilities_for_role(getattr(user, "role", None))
    return frozenset(capabilities)


def has_capability(user, capability: str) -> bool:
    return capability in caller_capabilities(user)


def is_admin(user) -> bool:
    """Any authenticated admin account, whatever its role."""
    return bool(caller_capabilities(user))
