from rest_framework.permissions import BasePermission

from utils.rbac import (
    MANAGE_CATALOG,
    MANAGE_ORDERS,
    UPLOAD_IMAGES,
    VIEW_STATS,
    has_capability,
)


class IsAdminAuthenticated(BasePermission):
    """Any authenticated admin account."""

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user is not None and getattr(user, "is_authenticated", False))


class CapabilityPermission(IsAdminAuthenticated):
    """Base permission: the caller must hold ``required_capability``."""

    required_capability = None
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view) -> bool:
        if not super().has_permission(request, view):
            return False
        if self.required_capability is None:
            return True
        return has_capability(request.user, self.required_capability)

    def has_object_permission(self, request, view, obj) -> bool:
        return self.has_permission(request, view)


class CanManageCatalog(CapabilityPermission):
    required_capability = MANAGE_CATALOG


class CanManageOrders(CapabilityPermission):
    required_capability = MANAGE_ORDERS


class CanViewStats(CapabilityPermission):
    required_capability = VIEW_STATS


class CanUploadImages(CapabilityPermission):
    required_capability = UPLOAD_IMAGES
