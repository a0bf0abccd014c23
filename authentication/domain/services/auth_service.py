"""
AuthService - Admin registration and login.

Keeps the credential rules out of the views: explicit password hashing on
registration, uniform failure on login, and token issuance.
"""

import logging
from typing import Optional

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import AccessToken

from authentication.models import Admin
from utils.logging_utils import mask_value
from utils.rbac import MANAGE_ADMINS, ROLE_ADMIN, ROLE_SUPER_ADMIN, has_capability

from .results import LoginResult, RegisterResult


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."
DUPLICATE_EMAIL = "An admin with this email already exists."

# Hashed on every login for an unknown email so both failure paths cost the same
_DUMMY_PASSWORD = "ivoirestore-dummy-password"


class AuthService:
    """
    Authentication service for admin accounts.

    Handles registration, login and bearer token issuance.
    """

    def __init__(self):
        self._dummy_hash = None

    def issue_token(self, admin) -> str:
        """Signed access token whose ``id`` claim is the admin id."""
        token = AccessToken.for_user(admin)
        token["role"] = admin.role
        return str(token)

    def register(self, name: str, email: str, password: str, role: Optional[str] = None, caller=None) -> RegisterResult:
        """
        Create an admin account.

        Business Logic:
        1. Resolve the role: anonymous callers always get ``admin``; only a
           caller holding ``manage_admins`` may create a ``super_admin``
        2. Reject an email that is already registered
        3. Hash the password (bcrypt) and create the account
        4. Issue a bearer token

        Args:
            name: Display name
            email: Normalized email address
            password: Clear-text password, at least 8 characters
            role: Requested role, optional
            caller: Authenticated admin performing the registration, if any

        Returns:
            RegisterResult with the new admin and its token
        """
        role = role or ROLE_ADMIN
        if role == ROLE_SUPER_ADMIN and not has_capability(caller, MANAGE_ADMINS):
            logger.warning(f"Refused super_admin registration for {mask_value(email)}")
            return RegisterResult(
                success=False,
                error_code="forbidden",
                error="Only a super admin can create another super admin.",
            )

        if Admin.objects.filter(email=email).exists():
            return RegisterResult(success=False, error_code="conflict", error=DUPLICATE_EMAIL)

        try:
            with transaction.atomic():
                admin = Admin.objects.create(
                    name=name,
                    email=email,
                    role=role,
                    password=make_password(password),
                )
        except IntegrityError:
            # Concurrent registration with the same email
            return RegisterResult(success=False, error_code="conflict", error=DUPLICATE_EMAIL)

        logger.info(f"New admin created: {mask_value(admin.email)} role={admin.role}")
        return RegisterResult(
            success=True,
            admin=admin,
            token=self.issue_token(admin),
            message="Admin account created successfully.",
        )

    def login(self, email: str, password: str) -> LoginResult:
        """
        Verify credentials and issue a fresh token.

        Unknown email and wrong password produce the same error.
        """
        admin = Admin.objects.filter(email=(email or "").strip().lower()).first()

        if admin is None:
            check_password(password, self._get_dummy_hash())
            logger.warning(f"Failed login for {mask_value(email)}")
            return LoginResult(success=False, error=INVALID_CREDENTIALS)

        if not admin.check_password(password):
            logger.warning(f"Failed login for {mask_value(email)}")
            return LoginResult(success=False, error=INVALID_CREDENTIALS)

        logger.info(f"Admin logged in: {mask_value(admin.email)}")
        return LoginResult(
            success=True,
            admin=admin,
            token=self.issue_token(admin),
            message="Login successful.",
        )

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = make_password(_DUMMY_PASSWORD)
        return self._dummy_hash
