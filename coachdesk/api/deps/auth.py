"""
Authentication dependencies.

Every request re-derives the current user from the Firebase ID token in
the Authorization header; unknown uids are provisioned on the spot.

Dependencies: fastapi, coachdesk.boundary.auth, coachdesk.application.services
System role: Current-user resolution for all routes
"""

import logging

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.user_service import UserService
from coachdesk.boundary.auth.firebase import verify_id_token
from coachdesk.boundary.db import get_async_db
from coachdesk.boundary.db.models import UserModel
from coachdesk.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """
    Verify the bearer token and return its claims.

    Raises:
        AuthenticationError: If the header is missing or the token invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    claims = await run_in_threadpool(verify_id_token, credentials.credentials)
    if not claims.get("uid"):
        raise AuthenticationError("Invalid token payload")
    return claims


async def get_current_user(
    claims: dict = Depends(get_token_claims),
    db: AsyncSession = Depends(get_async_db),
) -> UserModel:
    """
    Resolve (and on first login, provision) the current user.

    Returns:
        UserModel: Authenticated user
    """
    return await UserService(db).get_or_provision(
        user_id=claims["uid"],
        email=claims.get("email"),
        name=claims.get("name"),
    )
