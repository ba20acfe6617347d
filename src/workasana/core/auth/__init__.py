"""Auth domain types and utilities."""

from workasana.core.auth.jwt import TokenError, TokenService
from workasana.core.auth.password import hash_password, verify_password
from workasana.core.auth.repository import UserRepository
from workasana.core.auth.service import AuthService
from workasana.core.auth.types import AccessClaims, RefreshClaims, TokenPair, User

__all__ = [
    "User",
    "AccessClaims",
    "RefreshClaims",
    "TokenPair",
    "hash_password",
    "verify_password",
    "TokenService",
    "TokenError",
    "UserRepository",
    "AuthService",
]
