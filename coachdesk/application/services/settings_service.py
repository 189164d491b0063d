"""
Settings service orchestrator.

Manages the user's Claude API key (encrypted at rest), model choice and
active analysis/preparation prompts.

Dependencies: coachdesk.boundary.db.CRUD, coachdesk.core.encryption
System role: User settings use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.user_crud import user_crud
from coachdesk.boundary.db.models import UserModel
from coachdesk.core.ai.claude_models import CLAUDE_MODELS, DEFAULT_CLAUDE_MODEL, is_supported_model
from coachdesk.core.encryption import SecretCipher, get_cipher, mask_api_key
from coachdesk.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

PROMPT_FIELDS = {
    "analysis": "analysis_prompt",
    "preparation": "preparation_prompt",
}


class SettingsService:
    """User settings orchestrator."""

    def __init__(self, db: AsyncSession, cipher: SecretCipher | None = None) -> None:
        """
        Initialize settings service.

        Args:
            db: Async SQLAlchemy session
            cipher: Secret cipher (built from settings on first use if omitted)
        """
        self.db = db
        self._cipher = cipher

    @property
    def cipher(self) -> SecretCipher:
        if self._cipher is None:
            self._cipher = get_cipher()
        return self._cipher

    async def _get_user(self, user_id: str) -> UserModel:
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def _to_dict(self, user: UserModel) -> dict:
        masked = None
        if user.claude_api_key:
            masked = mask_api_key(self.cipher.safe_decrypt(user.claude_api_key))
        return {
            "claude_api_key": masked,
            "claude_model": user.claude_model or DEFAULT_CLAUDE_MODEL,
            "analysis_prompt": user.analysis_prompt,
            "preparation_prompt": user.preparation_prompt,
            "has_api_key": bool(user.claude_api_key),
        }

    async def get_settings(self, user_id: str) -> dict:
        """
        Get the user's settings with the API key masked.

        Returns:
            dict: claude_api_key (masked or None), claude_model, prompts, has_api_key
        """
        user = await self._get_user(user_id)
        return self._to_dict(user)

    async def update_api_configuration(self, user_id: str, api_key: str, model: str) -> dict:
        """
        Store a new Claude API key and model.

        Args:
            user_id: Current user id
            api_key: Plaintext API key
            model: Claude model id

        Returns:
            dict: Updated settings

        Raises:
            ValidationError: If the key is blank or the model unknown
        """
        api_key = (api_key or "").strip()
        if not api_key:
            raise ValidationError("API key is required", field="api_key")
        if not is_supported_model(model):
            raise ValidationError("Unsupported Claude model", field="model", details={"model": model})

        user = await self._get_user(user_id)
        await user_crud.update(
            self.db,
            user,
            claude_api_key=self.cipher.encrypt(api_key),
            claude_model=model,
        )
        logger.info("API configuration updated", extra={"user_id": user_id, "model": model})
        return self._to_dict(user)

    async def update_system_prompt(self, user_id: str, prompt_type: str, prompt: str) -> dict:
        """
        Replace the active analysis or preparation prompt.

        Args:
            user_id: Current user id
            prompt_type: "analysis" or "preparation"
            prompt: New prompt text

        Returns:
            dict: Updated settings
        """
        field = PROMPT_FIELDS.get(prompt_type)
        if field is None:
            raise ValidationError("Invalid prompt type", field="type")

        user = await self._get_user(user_id)
        await user_crud.update(self.db, user, **{field: prompt})
        logger.info("System prompt updated", extra={"user_id": user_id, "prompt_type": prompt_type})
        return self._to_dict(user)

    @staticmethod
    def list_models() -> dict:
        """Supported Claude models and the default."""
        return {"models": CLAUDE_MODELS, "default": DEFAULT_CLAUDE_MODEL}
