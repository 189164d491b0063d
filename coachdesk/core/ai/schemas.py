"""
Schemas for structured AI output.

Dependencies: pydantic
System role: Typed results of response parsing
"""

from pydantic import BaseModel, Field


class ParsedResource(BaseModel):
    """A coaching resource suggested by Claude."""

    title: str = Field(description="Resource title")
    type: str = Field(default="article", description="article/framework/tool/book/video")
    url: str | None = Field(default=None, description="Public URL or where to find it")
    description: str = Field(default="", description="Why the resource is relevant")
    tags: list[str] = Field(default_factory=list, description="Suggested resource tags")
