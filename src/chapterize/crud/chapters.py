"""Chapter persistence: listing, deletion, and batch writes of parsed drafts"""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, select

from chapterize.core.models import ChapterDraft, ImportMode
from chapterize.crud.books import require_book, touch_content
from chapterize.crud.models import Chapter


logger = logging.getLogger(__name__)


def list_chapters(session: Session, book_id: UUID) -> list[Chapter]:
    """Return a book's chapters ordered by chapter_number ascending."""
    return list(
        session.exec(
            select(Chapter)
            .where(Chapter.book_id == book_id)
            .order_by(Chapter.chapter_number.asc())
        ).all()
    )


def max_chapter_number(session: Session, book_id: UUID) -> int:
    """Return the highest chapter_number stored for a book, or 0 if it has none."""
    result = session.exec(
        select(func.max(Chapter.chapter_number)).where(Chapter.book_id == book_id)
    ).one()
    return result or 0


def delete_chapters(session: Session, book_id: UUID) -> int:
    """Delete every chapter of a book. Returns the number of rows deleted."""
    existing = session.exec(select(Chapter).where(Chapter.book_id == book_id)).all()
    for chapter in existing:
        session.delete(chapter)
    session.flush()
    return len(existing)


def write_chapters(
    session: Session,
    book_id: UUID,
    drafts: list[ChapterDraft],
    mode: ImportMode | str,
    ) -> list[Chapter]:
    """Persist a parsed batch of drafts against a book's existing chapters.

    replace: delete all existing chapters, then number the batch from 1.
    add:     keep existing chapters and number the batch from max + 1.

    Title, content, anchor_id, word_count and is_preview come from the drafts
    unchanged. Flushes but does not commit; caller controls the transaction,
    so committing once after this call makes delete + insert atomic.
    Raises ValueError if the book does not exist or mode is invalid.
    """
    mode = ImportMode(mode)
    book = require_book(session, book_id)

    start = 1
    if mode == ImportMode.replace:
        deleted = delete_chapters(session, book_id)
        logger.info("Deleted %d existing chapter(s) from book %s", deleted, book_id)
    else:
        start = max_chapter_number(session, book_id) + 1

    chapters = [
        Chapter(
            book_id=book_id,
            title=draft.title,
            content=draft.content,
            chapter_number=start + i,
            anchor_id=draft.anchor_id,
            word_count=draft.word_count,
            is_preview=draft.is_preview,
        )
        for i, draft in enumerate(drafts)
    ]
    session.add_all(chapters)
    session.flush()
    touch_content(session, book)

    logger.info("Inserted %d chapter(s) into book %s starting at %d", len(chapters), book_id, start)
    return chapters
