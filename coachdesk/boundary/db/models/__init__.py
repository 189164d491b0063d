"""
Database models package.

Exports:
  - UserModel: Coach account
  - ClientModel, client_team_members: Clients and the team relation
  - CoachingSessionModel, session_tags: Sessions and their tags
  - ClientNoteModel: Client notes
  - TagModel, TagCategory: Shared tags
  - ResourceModel, ClientResourceModel, resource_tags: Resource library
  - PromptTemplateModel, PromptType: Prompt templates
  - ContextDocumentModel: Uploaded context documents

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Database model definitions for domain entities
"""

from coachdesk.boundary.db.models.user_model import UserModel
from coachdesk.boundary.db.models.client_model import ClientModel, client_team_members
from coachdesk.boundary.db.models.session_model import CoachingSessionModel, session_tags
from coachdesk.boundary.db.models.note_model import ClientNoteModel
from coachdesk.boundary.db.models.tag_model import TagCategory, TagModel
from coachdesk.boundary.db.models.resource_model import (
    ClientResourceModel,
    ResourceModel,
    resource_tags,
)
from coachdesk.boundary.db.models.template_model import PromptTemplateModel, PromptType
from coachdesk.boundary.db.models.context_document_model import ContextDocumentModel

__all__ = [
    "UserModel",
    "ClientModel",
    "client_team_members",
    "CoachingSessionModel",
    "session_tags",
    "ClientNoteModel",
    "TagCategory",
    "TagModel",
    "ResourceModel",
    "ClientResourceModel",
    "resource_tags",
    "PromptTemplateModel",
    "PromptType",
    "ContextDocumentModel",
]
