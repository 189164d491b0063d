"""
Context document schemas.

Dependencies: pydantic
System role: Context document API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel


class ContextDocumentResponse(BaseModel):
    id: uuid.UUID
    name: str
    file_url: str
    file_type: str
    content: str
    created_at: datetime


class CombinedContextResponse(BaseModel):
    content: str
    document_count: int
