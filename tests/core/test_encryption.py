"""
Test suite for API key encryption and masking.

System role: Verification of secret handling
"""

import pytest
from cryptography.fernet import Fernet

from coachdesk.core.encryption import SecretCipher, mask_api_key


class TestSecretCipher:
    """Test suite for SecretCipher."""

    def test_encrypt_should_not_store_plaintext(self, cipher: SecretCipher) -> None:
        token = cipher.encrypt("sk-ant-api03-secret")

        assert "sk-ant" not in token
        assert cipher.decrypt(token) == "sk-ant-api03-secret"

    def test_safe_decrypt_should_return_none_for_foreign_token(self, cipher: SecretCipher) -> None:
        token = SecretCipher(Fernet.generate_key()).encrypt("secret")

        assert cipher.safe_decrypt(token) is None

    def test_safe_decrypt_should_return_none_for_garbage(self, cipher: SecretCipher) -> None:
        assert cipher.safe_decrypt("not-a-token") is None
        assert cipher.safe_decrypt(None) is None

    def test_init_should_reject_malformed_key(self) -> None:
        with pytest.raises(ValueError):
            SecretCipher("too-short")


class TestMaskApiKey:
    """Test suite for mask_api_key()."""

    def test_should_keep_prefix_and_suffix_of_long_keys(self) -> None:
        assert mask_api_key("sk-ant-api03-abcdefgh1234") == "sk-ant-...1234"

    def test_should_keep_three_chars_of_short_keys(self) -> None:
        assert mask_api_key("shortkey10") == "sho..."

    def test_should_pass_through_missing_key(self) -> None:
        assert mask_api_key(None) is None
