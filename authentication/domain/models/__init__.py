from .admin import Admin, AdminManager

__all__ = ["Admin", "AdminManager"]
