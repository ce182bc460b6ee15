"""
Authentication dependencies for FastAPI routes.

Mutation endpoints require a bearer JWT in the Authorization header. The
token's subject becomes the caller identity and is bound into the log
context for the rest of the request.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings
from core.logging import bind_context

from ..schemas import Identity
from .jwt import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    """
    Resolve the caller from a bearer token.

    Steps:
    1) Require an Authorization: Bearer header.
    2) Decode the JWT and extract the subject (and optional name).
    3) Bind the subject to the logging context. Runs on the event loop so
       the binding is visible to the route and services of this request.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials, settings)
    except ValueError:
        raise _unauthorized("Invalid authentication credentials") from None

    subject = payload.get("sub")
    if not subject:
        raise _unauthorized("Invalid authentication credentials")

    identity = Identity(id=str(subject), name=payload.get("name"))
    bind_context(subject=identity.id)
    return identity
