"""Book persistence: create and lookup"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Session, select

from chapterize.crud.models import Book


def create_book(session: Session, title: str) -> Book:
    """Insert a new Book. Flushes but does not commit."""
    book = Book(title=title)
    session.add(book)
    session.flush()
    return book


def get_book(session: Session, book_id: UUID) -> Book | None:
    """Return the Book with the given id, or None if not found."""
    return session.get(Book, book_id)


def require_book(session: Session, book_id: UUID) -> Book:
    """Return the Book with the given id. Raises ValueError if it does not exist."""
    book = get_book(session, book_id)
    if book is None:
        raise ValueError(f"Book {book_id} not found")
    return book


def list_books(session: Session) -> list[Book]:
    """Return all books ordered by title."""
    return list(session.exec(select(Book).order_by(Book.title)).all())


def touch_content(session: Session, book: Book) -> Book:
    """Mark the book's chapter content as changed now."""
    book.updated_content_at = datetime.now()
    book.updated_at = book.updated_content_at
    session.add(book)
    session.flush()
    return book
