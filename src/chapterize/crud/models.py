"""Database table definitions for books and their chapters"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel


class Book(SQLModel, table=True):
    """A book that chapters are imported into"""
    __tablename__ = "books"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(..., sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_content_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=False), nullable=True))


class Chapter(SQLModel, table=True):
    """A persisted chapter of a book, ordered by chapter_number"""
    __tablename__ = "chapters"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    book_id: UUID = Field(..., foreign_key="books.id", index=True, nullable=False)
    title: str = Field(..., sa_column=Column(Text, nullable=False))
    content: str = Field(..., sa_column=Column(Text, nullable=False))
    chapter_number: int = Field(..., ge=1, index=True, description="1-based reading order within the book")
    anchor_id: str = Field(..., nullable=False, description="Slug-form in-book anchor, e.g. ch-1-prologue")
    word_count: int = Field(default=0, ge=0, nullable=False)
    is_preview: bool = Field(default=False, nullable=False, description="Readable without a subscription")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
