"""Request authentication helpers.

The caller is identified by a bearer token in the ``Authorization`` header,
falling back to the auth cookie. Routes turn it into an explicit
``AuthContext`` that is handed to every ledger operation.
"""

from fastapi import Request

from bazaar.config import AuthSettings
from bazaar.domain.error import ForbiddenError, UnauthenticatedError
from bazaar.domain.service import JWTService
from bazaar.domain.value import AuthContext, UserRole


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the raw token from the request, header first."""
    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return request.cookies.get(auth_settings.cookie_name)


def optional_auth(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> AuthContext | None:
    """Caller context for read routes; None when anonymous or invalid."""
    return jwt_service.get_auth_context(extract_token(request, auth_settings))


def require_auth(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> AuthContext:
    """Caller context for mutating routes.

    Raises:
        UnauthenticatedError: If no valid token was sent
        ForbiddenError: If the account is banned
    """
    auth = optional_auth(request, jwt_service, auth_settings)
    if auth is None:
        raise UnauthenticatedError("Authentication required")
    if auth.role is UserRole.BANNED:
        raise ForbiddenError("Your account is banned")
    return auth
