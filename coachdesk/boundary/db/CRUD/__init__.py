"""
CRUD operations for database models.

Exports base CRUD classes and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from coachdesk.boundary.db.CRUD import client_crud, session_crud

    client = await client_crud.get_owned(db, client_id, user_id)
"""

from coachdesk.boundary.db.CRUD.base_crud import BaseCRUD, OwnedCRUD
from coachdesk.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from coachdesk.boundary.db.CRUD.client_crud import ClientCRUD, client_crud
from coachdesk.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from coachdesk.boundary.db.CRUD.note_crud import NoteCRUD, note_crud
from coachdesk.boundary.db.CRUD.tag_crud import TagCRUD, tag_crud
from coachdesk.boundary.db.CRUD.resource_crud import ResourceCRUD, resource_crud
from coachdesk.boundary.db.CRUD.template_crud import TemplateCRUD, template_crud
from coachdesk.boundary.db.CRUD.context_document_crud import (
    ContextDocumentCRUD,
    context_document_crud,
)

__all__ = [
    "BaseCRUD",
    "OwnedCRUD",
    "UserCRUD",
    "user_crud",
    "ClientCRUD",
    "client_crud",
    "SessionCRUD",
    "session_crud",
    "NoteCRUD",
    "note_crud",
    "TagCRUD",
    "tag_crud",
    "ResourceCRUD",
    "resource_crud",
    "TemplateCRUD",
    "template_crud",
    "ContextDocumentCRUD",
    "context_document_crud",
]
