"""
Context document ORM model.

Stores the extracted text of an uploaded file so it can be prepended to
AI prompts without fetching the object again.

Dependencies: sqlalchemy, coachdesk.boundary.db.base
System role: Prompt personalization material per user
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coachdesk.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ContextDocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Uploaded context document.

    Attributes:
        name: Original file name
        file_url: Public URL of the stored object
        file_key: Object key inside the bucket
        file_type: MIME type reported at upload
        content: Extracted text
    """

    __tablename__ = "context_documents"

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_key: Mapped[str] = mapped_column(String(512), nullable=False)
    file_type: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
