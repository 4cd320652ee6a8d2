"""
Authentication Dependency for FastAPI.

- Extracts and validates a JWT from the Authorization header (Bearer scheme)
- Returns AuthUser for use in route handlers
- Raises AuthenticationError (401) for a missing, expired or invalid token

Config needed (from taskboard.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard.config.settings import Config
from taskboard.errors import AuthenticationError


@dataclass(frozen=True)
class AuthUser:
    email: str


security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired") from None
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token") from None

    email = claims.get("email")
    if not isinstance(email, str) or "@" not in email:
        raise AuthenticationError("Missing required claims in token")

    return AuthUser(email=email)
