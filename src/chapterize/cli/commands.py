"""CLI command implementations"""

import json
from typing import Annotated, Optional
from uuid import UUID

import typer
from sqlmodel import Session

from chapterize.config import Settings, load_config
from chapterize.core.models import FileKind, ImportMode
from chapterize.core.pipeline import run_import, run_parse
from chapterize.core.utils.logs import setup_logging
from chapterize.crud.books import create_book, list_books, require_book
from chapterize.crud.chapters import list_chapters
from chapterize.crud.database import init_db, make_engine, reset_db
from chapterize.errors import ManuscriptError


PREVIEW_CHARS = 60


def _fail(msg: str, cause: Exception | None = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict | None = None) -> Settings:
    """Load config and configure logging, with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _book_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        _fail(f"Invalid book id: {value}")


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing data cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def add_book_cmd(
    title: Annotated[str, typer.Argument(help="Book title")],
    ):
    """Create a book and print its id."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        book = create_book(session, title)
        book_id = book.id
        session.commit()
    typer.echo(str(book_id))


def books_cmd():
    """List books with their ids and chapter counts."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        rows = [(b.id, b.title, len(list_chapters(session, b.id))) for b in list_books(session)]
    if not rows:
        typer.echo("No books found.")
        raise typer.Exit(1)
    for book_id, title, count in rows:
        typer.echo(f"{book_id}  {title} ({count} chapter(s))")


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Manuscript file (.txt, .md, .docx)")],
    kind: Annotated[Optional[FileKind], typer.Option("--kind", help="Override the kind inferred from the file name")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print drafts as JSON")] = False,
    storage: Annotated[Optional[str], typer.Option("--storage-dir", help="Root for relative file references")] = None,
    ):
    """Dry run: split a manuscript into chapters and print them without saving."""
    settings = _settings(overrides={"storage_dir": storage})
    try:
        drafts = run_parse(path, settings, kind)
    except (ManuscriptError, ValueError) as e:
        _fail(str(e))

    if as_json:
        typer.echo(json.dumps([d.model_dump() for d in drafts], indent=2, ensure_ascii=False))
        return
    for d in drafts:
        flag = " [preview]" if d.is_preview else ""
        typer.echo(f"  {d.chapter_number:>3}. {d.title} ({d.word_count} words) #{d.anchor_id}{flag}")
    typer.echo(f"Detected {len(drafts)} chapter(s)")


def import_cmd(
    book_id: Annotated[str, typer.Argument(help="Target book id")],
    path: Annotated[str, typer.Argument(help="Manuscript file (.txt, .md, .docx)")],
    mode: Annotated[ImportMode, typer.Option("--mode", help="add: append after existing chapters; replace: delete them first")] = ImportMode.add,
    kind: Annotated[Optional[FileKind], typer.Option("--kind", help="Override the kind inferred from the file name")] = None,
    storage: Annotated[Optional[str], typer.Option("--storage-dir", help="Root for relative file references")] = None,
    ):
    """Parse a manuscript and write its chapters to a book."""
    settings = _settings(overrides={"storage_dir": storage})
    engine = make_engine(settings.db_url)
    init_db(engine)
    target = _book_id(book_id)

    try:
        chapters = run_import(engine, target, path, mode, settings, kind)
    except (ManuscriptError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail("Failed to save chapters", e)

    with Session(engine) as session:
        title = require_book(session, target).title
    typer.echo(f"Imported {len(chapters)} chapter(s) into {title}")


def chapters_cmd(
    book_id: Annotated[str, typer.Argument(help="Book id")],
    ):
    """List a book's chapters in reading order."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    target = _book_id(book_id)

    with Session(engine) as session:
        try:
            require_book(session, target)
        except ValueError as e:
            _fail(str(e))
        chapters = list_chapters(session, target)

    if not chapters:
        typer.echo("No chapters found.")
        raise typer.Exit(1)
    for ch in chapters:
        flag = " [preview]" if ch.is_preview else ""
        excerpt = ch.content[:PREVIEW_CHARS].replace("\n", " ")
        typer.echo(f"  {ch.chapter_number:>3}. {ch.title} #{ch.anchor_id}{flag}  {excerpt}")
