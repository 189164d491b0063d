"""
Context document CRUD operations.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Context document persistence operations
"""

from coachdesk.boundary.db.CRUD.base_crud import OwnedCRUD
from coachdesk.boundary.db.models.context_document_model import ContextDocumentModel


class ContextDocumentCRUD(OwnedCRUD[ContextDocumentModel]):
    """CRUD operations for ContextDocumentModel."""

    def __init__(self) -> None:
        """Initialize ContextDocumentCRUD with ContextDocumentModel."""
        super().__init__(ContextDocumentModel)


context_document_crud = ContextDocumentCRUD()
