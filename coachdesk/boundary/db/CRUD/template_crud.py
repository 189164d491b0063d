"""
Prompt template CRUD operations.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Prompt template persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.base_crud import OwnedCRUD
from coachdesk.boundary.db.models.template_model import PromptTemplateModel, PromptType


class TemplateCRUD(OwnedCRUD[PromptTemplateModel]):
    """CRUD operations for PromptTemplateModel."""

    def __init__(self) -> None:
        """Initialize TemplateCRUD with PromptTemplateModel."""
        super().__init__(PromptTemplateModel)

    async def get_default_for_type(
        self,
        session: AsyncSession,
        user_id: str,
        type: PromptType,
    ) -> PromptTemplateModel | None:
        """Retrieve the user's oldest seeded template of a type."""
        stmt = (
            select(PromptTemplateModel)
            .where(
                PromptTemplateModel.user_id == user_id,
                PromptTemplateModel.type == type,
                PromptTemplateModel.is_default.is_(True),
            )
            .order_by(PromptTemplateModel.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


template_crud = TemplateCRUD()
