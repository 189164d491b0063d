"""
User service orchestrator.

Provisions users on first sight of an identity-provider uid and manages
the profile.

Dependencies: coachdesk.boundary.db.CRUD, coachdesk.core.ai.prompts
System role: Signup and profile use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.user_crud import user_crud
from coachdesk.boundary.db.models import PromptTemplateModel, PromptType, UserModel
from coachdesk.core.ai.claude_models import DEFAULT_CLAUDE_MODEL
from coachdesk.core.ai.prompts import (
    DEFAULT_ANALYSIS_PROMPT,
    DEFAULT_PREPARATION_PROMPT,
    DEFAULT_PROMPT_TEMPLATES,
)
from coachdesk.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


class UserService:
    """User provisioning and profile orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_or_provision(
        self,
        user_id: str,
        email: str | None,
        name: str | None = None,
    ) -> UserModel:
        """
        Return the user row, creating it with defaults on first login.

        New users get the default analysis/preparation prompts and the four
        default prompt templates. Template seeding is best-effort.

        Args:
            user_id: Identity provider uid
            email: Email claim (may be missing for some providers)
            name: Display name claim

        Returns:
            UserModel: Existing or newly created user
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is not None:
            return user

        email = email or ""
        try:
            user = await user_crud.create(
                self.db,
                id=user_id,
                email=email,
                name=name or (email.split("@")[0] if email else None),
                claude_model=DEFAULT_CLAUDE_MODEL,
                analysis_prompt=DEFAULT_ANALYSIS_PROMPT,
                preparation_prompt=DEFAULT_PREPARATION_PROMPT,
            )
        except IntegrityError:
            # Another request provisioned the same uid first
            await self.db.rollback()
            user = await user_crud.get_by_id(self.db, user_id)
            if user is None:
                raise
            return user

        await self._seed_default_templates(user_id)
        logger.info("User provisioned", extra={"user_id": user_id})
        return user

    async def _seed_default_templates(self, user_id: str) -> None:
        try:
            async with self.db.begin_nested():
                for template in DEFAULT_PROMPT_TEMPLATES:
                    self.db.add(
                        PromptTemplateModel(
                            user_id=user_id,
                            name=template["name"],
                            type=PromptType(template["type"]),
                            content=template["content"],
                            is_default=True,
                        )
                    )
        except SQLAlchemyError:
            logger.exception("Failed to create default templates", extra={"user_id": user_id})

    async def _get_user(self, user_id: str) -> UserModel:
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def get_profile(self, user_id: str) -> dict:
        """
        Get the current user's profile.

        Returns:
            dict: id, email, name

        Raises:
            NotFoundError: If the user row does not exist
        """
        user = await self._get_user(user_id)
        return {"id": user.id, "email": user.email, "name": user.name}

    async def update_profile(self, user_id: str, name: str) -> dict:
        """
        Rename the current user.

        Args:
            user_id: Current user id
            name: New display name (trimmed)

        Returns:
            dict: Updated profile

        Raises:
            ValidationError: If the name is empty or too long
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name cannot be empty", field="name")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Name is too long (max {MAX_NAME_LENGTH} characters)", field="name"
            )

        user = await self._get_user(user_id)
        await user_crud.update(self.db, user, name=name)
        logger.info("Profile updated", extra={"user_id": user_id})
        return {"id": user.id, "email": user.email, "name": user.name}
