"""
Result objects for the authentication service layer.

Services return these dataclasses instead of raising, so views decide how a
failure maps to an HTTP response.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class LoginResult:
    """Result of a login attempt."""

    success: bool
    admin: Optional[Any] = None  # Admin instance
    token: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None


@dataclass
class RegisterResult:
    """Result of an admin registration attempt."""

    success: bool
    admin: Optional[Any] = None  # Admin instance
    token: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    errors: Optional[List[Dict[str, str]]] = None  # Field-level errors
    message: Optional[str] = None
