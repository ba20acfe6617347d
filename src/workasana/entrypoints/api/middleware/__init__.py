"""Request guards."""

from workasana.entrypoints.api.middleware.jwt_auth import (
    SessionContext,
    SessionDep,
    require_session,
)

__all__ = ["SessionContext", "SessionDep", "require_session"]
