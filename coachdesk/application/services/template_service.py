"""
Prompt template service orchestrator.

A template is active when its content equals the user's current prompt of
the same type. Setting a template as default copies its content into
that prompt; active templates cannot be deleted.

Dependencies: coachdesk.boundary.db.CRUD
System role: Prompt template use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.application.services.mappers import template_to_dict
from coachdesk.application.services.settings_service import PROMPT_FIELDS
from coachdesk.boundary.db.CRUD.template_crud import template_crud
from coachdesk.boundary.db.CRUD.user_crud import user_crud
from coachdesk.boundary.db.models import PromptTemplateModel, PromptType, UserModel
from coachdesk.core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class TemplateService:
    """Prompt template orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize template service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_user(self, user_id: str) -> UserModel:
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def _get_template(self, template_id: UUID, user_id: str) -> PromptTemplateModel:
        template = await template_crud.get_owned(self.db, template_id, user_id)
        if template is None:
            raise NotFoundError("Template", template_id)
        return template

    @staticmethod
    def _active_prompts(user: UserModel) -> dict[str, str | None]:
        return {
            PromptType.ANALYSIS.value: user.analysis_prompt,
            PromptType.PREPARATION.value: user.preparation_prompt,
        }

    async def list_templates(self, user_id: str) -> list[dict]:
        """
        List the user's templates, newest first.

        Returns:
            list[dict]: Templates with is_active computed
        """
        user = await self._get_user(user_id)
        templates = await template_crud.list_owned(self.db, user_id)
        active = self._active_prompts(user)
        return [template_to_dict(t, active) for t in templates]

    async def create_template(self, user_id: str, name: str, template_type: str, content: str) -> dict:
        """
        Create a custom template.

        Raises:
            ValidationError: If name or content is blank or type unknown
        """
        name = name.strip()
        if not name:
            raise ValidationError("Template name is required", field="name")
        if not content.strip():
            raise ValidationError("Template content is required", field="content")
        try:
            prompt_type = PromptType(template_type)
        except ValueError as e:
            raise ValidationError("Invalid template type", field="type") from e

        user = await self._get_user(user_id)
        template = await template_crud.create(
            self.db,
            user_id=user_id,
            name=name,
            type=prompt_type,
            content=content,
            is_default=False,
        )
        logger.info(
            "Template created",
            extra={"user_id": user_id, "template_id": str(template.id), "template_type": template_type},
        )
        return template_to_dict(template, self._active_prompts(user))

    async def update_template(self, user_id: str, template_id: UUID, name: str, content: str) -> dict:
        """
        Rename or rewrite a template.

        Raises:
            NotFoundError: If the template is not owned by the user
        """
        name = name.strip()
        if not name:
            raise ValidationError("Template name is required", field="name")
        if not content.strip():
            raise ValidationError("Template content is required", field="content")

        user = await self._get_user(user_id)
        template = await self._get_template(template_id, user_id)
        await template_crud.update(self.db, template, name=name, content=content)
        logger.info("Template updated", extra={"user_id": user_id, "template_id": str(template_id)})
        return template_to_dict(template, self._active_prompts(user))

    async def delete_template(self, user_id: str, template_id: UUID) -> None:
        """
        Delete a template that is not currently active.

        Raises:
            NotFoundError: If the template is not owned by the user
            ConflictError: If the template is the active prompt of its type
        """
        user = await self._get_user(user_id)
        template = await self._get_template(template_id, user_id)
        if self._active_prompts(user).get(template.type.value) == template.content:
            raise ConflictError(
                "Cannot delete active template. Please set a different template as default first.",
                details={"template_id": str(template_id)},
            )
        await template_crud.delete(self.db, template)
        logger.info("Template deleted", extra={"user_id": user_id, "template_id": str(template_id)})

    async def set_template_as_default(self, user_id: str, template_id: UUID) -> dict:
        """
        Make a template the active prompt of its type.

        Returns:
            dict: The template, now active
        """
        user = await self._get_user(user_id)
        template = await self._get_template(template_id, user_id)
        field = PROMPT_FIELDS[template.type.value]
        await user_crud.update(self.db, user, **{field: template.content})
        logger.info(
            "Template set as default",
            extra={"user_id": user_id, "template_id": str(template_id), "template_type": template.type.value},
        )
        return template_to_dict(template, self._active_prompts(user))
