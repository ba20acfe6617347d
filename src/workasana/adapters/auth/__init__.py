"""Credential store adapters."""

from workasana.adapters.auth.store import StoreUserRepository

__all__ = ["StoreUserRepository"]
