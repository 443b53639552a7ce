"""Intermediate data models for the manuscript parse pipeline"""

from enum import Enum

from pydantic import BaseModel, Field


class FileKind(str, Enum):
    """Declared kind of an uploaded manuscript file"""
    text = "text"
    markdown = "markdown"
    docx = "docx"
    epub = "epub"
    pdf = "pdf"


class ImportMode(str, Enum):
    """How parsed chapters are written against a book's existing chapters"""
    add = "add"
    replace = "replace"


class ChapterDraft(BaseModel):
    """A parsed, not yet persisted chapter."""
    title: str = Field(..., min_length=1)
    content: str
    chapter_number: int = Field(..., ge=1)      # 1-based position within the parsed batch
    anchor_id: str
    word_count: int = Field(default=0, ge=0)
    is_preview: bool = False
