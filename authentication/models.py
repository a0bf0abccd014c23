from authentication.domain.models.admin import Admin


__all__ = ["Admin"]
