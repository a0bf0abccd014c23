import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models

from utils.rbac import ROLE_ADMIN, ROLE_SUPER_ADMIN, capabilities_for_role


class AdminManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        admin = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        admin.set_password(password)
        admin.save(using=self._db)
        return admin

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", ROLE_SUPER_ADMIN)
        return self.create_user(email, password, **extra_fields)


class Admin(AbstractBaseUser):
    """Back-office account. Every account is an administrator of some role."""

    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_SUPER_ADMIN, "Super admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_ADMIN)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # AbstractBaseUser.last_login is not tracked
    last_login = None

    objects = AdminManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    @property
    def capabilities(self):
        return capabilities_for_role(self.role)

    def __str__(self):
        return self.email
