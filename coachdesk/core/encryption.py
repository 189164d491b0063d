"""
Symmetric encryption for user-supplied secrets.

Claude API keys are stored as Fernet tokens (AES-128-CBC + HMAC) and only
decrypted in memory right before a Claude call.

Dependencies: cryptography
System role: At-rest protection of BYOK API keys
"""

import logging

from cryptography.fernet import Fernet, InvalidToken

from coachdesk.configs import get_settings

logger = logging.getLogger(__name__)


class SecretCipher:
    """Encrypt and decrypt short secrets with a Fernet key."""

    def __init__(self, key: str | bytes) -> None:
        """
        Args:
            key: Urlsafe base64 Fernet key

        Raises:
            ValueError: If the key is not a valid Fernet key
        """
        self._fernet = Fernet(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext and return the token as text."""
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")

    def decrypt(self, token: str) -> str:
        """
        Decrypt a token produced by encrypt().

        Raises:
            InvalidToken: If the token was tampered with or uses another key
        """
        return self._fernet.decrypt(token.encode("ascii")).decode("utf-8")

    def safe_decrypt(self, token: str | None) -> str | None:
        """Decrypt a token, returning None when it is missing or unreadable."""
        if not token:
            return None
        try:
            return self.decrypt(token)
        except (InvalidToken, ValueError):
            logger.warning("Failed to decrypt stored secret")
            return None


def get_cipher() -> SecretCipher:
    """
    Build the cipher from settings.

    Raises:
        ValueError: If SECURITY_ENCRYPTION_KEY is unset or malformed
    """
    key = get_settings().security.encryption_key
    if not key:
        raise ValueError("SECURITY_ENCRYPTION_KEY is not configured")
    return SecretCipher(key)


def mask_api_key(api_key: str | None) -> str | None:
    """
    Mask an API key for display.

    Short keys keep the first 3 characters, longer keys keep the first 7
    and the last 4.
    """
    if not api_key:
        return None
    if len(api_key) <= 10:
        return api_key[:3] + "..."
    return f"{api_key[:7]}...{api_key[-4:]}"
