"""
ORM-to-dict mappers shared by services.

Services return plain dicts; these helpers keep their shape consistent
across list, detail and mutation results. Callers must have loaded the
relationships a mapper touches.

Dependencies: coachdesk.boundary.db.models
System role: Service output shaping
"""

from coachdesk.boundary.db.models import (
    ClientModel,
    ClientNoteModel,
    ClientResourceModel,
    CoachingSessionModel,
    ContextDocumentModel,
    PromptTemplateModel,
    ResourceModel,
    TagModel,
)


def client_ref(client: ClientModel) -> dict:
    return {
        "id": client.id,
        "name": client.name,
        "role": client.role,
        "company": client.company,
    }


def client_to_dict(client: ClientModel, session_count: int = 0) -> dict:
    return {
        "id": client.id,
        "name": client.name,
        "role": client.role,
        "company": client.company,
        "email": client.email,
        "phone": client.phone,
        "birthday": client.birthday,
        "coaching_since": client.coaching_since,
        "career_goal": client.career_goal,
        "key_challenge": client.key_challenge,
        "key_stakeholders": client.key_stakeholders,
        "reports_to_id": client.reports_to_id,
        "session_count": session_count,
        "created_at": client.created_at,
        "updated_at": client.updated_at,
    }


def note_to_dict(note: ClientNoteModel) -> dict:
    return {
        "id": note.id,
        "client_id": note.client_id,
        "content": note.content,
        "created_at": note.created_at,
        "updated_at": note.updated_at,
    }


def tag_to_dict(tag: TagModel) -> dict:
    return {"id": tag.id, "name": tag.name, "category": tag.category.value}


def resource_to_dict(resource: ResourceModel) -> dict:
    return {
        "id": resource.id,
        "title": resource.title,
        "type": resource.type,
        "url": resource.url,
        "description": resource.description,
        "tags": [tag.name for tag in resource.tags],
    }


def client_resource_to_dict(link: ClientResourceModel) -> dict:
    return {
        "id": link.id,
        "session_id": link.session_id,
        "suggested_by": link.suggested_by,
        "created_at": link.created_at,
        "resource": resource_to_dict(link.resource),
    }


def session_summary(session: CoachingSessionModel) -> dict:
    return {
        "id": session.id,
        "client_id": session.client_id,
        "title": session.title,
        "date": session.date,
        "has_transcript": bool(session.transcript),
        "has_analysis": bool(session.summary or session.analysis),
        "created_at": session.created_at,
    }


def session_client_ref(session: CoachingSessionModel) -> dict:
    return {
        "id": session.client.id,
        "name": session.client.name,
        "company": session.client.company,
    }


def session_to_dict(session: CoachingSessionModel) -> dict:
    return {
        "id": session.id,
        "client_id": session.client_id,
        "title": session.title,
        "date": session.date,
        "transcript": session.transcript,
        "summary": session.summary,
        "follow_up_email": session.follow_up_email,
        "analysis": session.analysis,
        "preparation_notes": session.preparation_notes,
        "created_at": session.created_at,
        "updated_at": session.updated_at,
    }


def template_to_dict(template: PromptTemplateModel, active_prompts: dict[str, str | None]) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "type": template.type.value,
        "content": template.content,
        "is_default": template.is_default,
        "is_active": active_prompts.get(template.type.value) == template.content,
        "created_at": template.created_at,
        "updated_at": template.updated_at,
    }


def context_document_to_dict(document: ContextDocumentModel) -> dict:
    return {
        "id": document.id,
        "name": document.name,
        "file_url": document.file_url,
        "file_type": document.file_type,
        "content": document.content,
        "created_at": document.created_at,
    }
