"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from chapterize.core.models import ChapterDraft
from chapterize.core.utils.slug import anchor_id
from chapterize.crud.models import Book, Chapter


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="book")
def book_fixture(session):
    """A minimal Book persisted to the session."""
    b = Book(title="The Long Road Home")
    session.add(b)
    session.flush()
    return b


@pytest.fixture(name="existing_chapters")
def existing_chapters_fixture(session, book):
    """Three chapters already stored for the book."""
    chapters = [
        Chapter(book_id=book.id, title=f"Old {n}", content="old content " * 10,
                chapter_number=n, anchor_id=f"ch-{n}-old-{n}", word_count=20, is_preview=n == 1)
        for n in (1, 2, 3)
    ]
    session.add_all(chapters)
    session.flush()
    return chapters


@pytest.fixture(name="make_drafts")
def make_drafts_fixture():
    """Factory for drafts numbered 1..N as the segmenter would build them."""
    def _make(*titles: str) -> list[ChapterDraft]:
        return [
            ChapterDraft(title=t, content=f"{t} body " * 10, chapter_number=i,
                         anchor_id=anchor_id(t, i), word_count=30, is_preview=i == 1)
            for i, t in enumerate(titles, start=1)
        ]
    return _make
