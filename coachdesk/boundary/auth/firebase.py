"""
Firebase Admin SDK token verification.

Clients authenticate with a Firebase ID token in the Authorization header.
The SDK is initialized lazily from a service account file, or from
application default credentials when no file is configured.

Dependencies: firebase_admin
System role: Identity provider boundary
"""

import logging

import firebase_admin
from firebase_admin import auth, credentials

from coachdesk.configs import get_settings
from coachdesk.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

_app: firebase_admin.App | None = None


def initialize_firebase() -> firebase_admin.App:
    """
    Initialize the Firebase Admin SDK once per process.

    Returns:
        firebase_admin.App: Initialized app
    """
    global _app

    if _app is not None:
        return _app

    security = get_settings().security
    if security.firebase_credentials:
        cred = credentials.Certificate(security.firebase_credentials)
        _app = firebase_admin.initialize_app(cred)
    else:
        options = {"projectId": security.firebase_project_id} if security.firebase_project_id else None
        _app = firebase_admin.initialize_app(options=options)
    logger.info("Firebase Admin SDK initialized")
    return _app


def verify_id_token(id_token: str) -> dict:
    """
    Verify a Firebase ID token and return its claims.

    Args:
        id_token: Raw JWT from the Authorization header

    Returns:
        dict: Decoded claims (uid, email, name, ...)

    Raises:
        AuthenticationError: If the token is malformed, expired or revoked
    """
    initialize_firebase()
    try:
        return auth.verify_id_token(id_token)
    except (auth.InvalidIdTokenError, auth.RevokedIdTokenError, ValueError) as e:
        logger.warning("Rejected ID token", extra={"error_type": type(e).__name__})
        raise AuthenticationError("Invalid authentication token") from e
