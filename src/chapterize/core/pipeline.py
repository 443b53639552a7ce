"""Pipeline step functions: load a stored manuscript, parse it, and write its chapters"""

import logging
from pathlib import Path
from uuid import UUID

from sqlmodel import Session

from chapterize.config import Settings
from chapterize.core.models import ChapterDraft, FileKind, ImportMode
from chapterize.core.parse import kind_from_path, parse_manuscript
from chapterize.crud.chapters import write_chapters
from chapterize.crud.models import Chapter


logger = logging.getLogger(__name__)


def resolve_manuscript(file_ref: str | Path, storage_dir: str | Path = ".") -> Path:
    """Resolve a stored file reference; relative references are looked up under storage_dir."""
    path = Path(file_ref)
    if not path.is_absolute():
        path = Path(storage_dir) / path
    if not path.is_file():
        raise ValueError(f"Failed to read manuscript: {path} does not exist")
    return path


def run_parse(
    file_ref: str | Path,
    settings: Settings,
    kind: FileKind | str | None = None,
    mode: ImportMode | str = ImportMode.add,
    ) -> list[ChapterDraft]:
    """Read and parse a stored manuscript without touching the database."""
    path = resolve_manuscript(file_ref, settings.storage_dir)
    kind = kind or kind_from_path(path)
    logger.info("Processing manuscript %s", path)
    return parse_manuscript(
        path.read_bytes(),
        kind,
        mode,
        min_manuscript_chars=settings.min_manuscript_chars,
        min_chapter_chars=settings.min_chapter_chars,
        slug_length=settings.anchor_slug_length,
    )


def run_import(
    engine,
    book_id: UUID,
    file_ref: str | Path,
    mode: ImportMode | str,
    settings: Settings,
    kind: FileKind | str | None = None,
    ) -> list[Chapter]:
    """Parse a stored manuscript and persist its chapters in a single transaction.

    Parsing finishes before the session opens, so a parse failure never
    touches existing chapters. Any write failure rolls back the whole batch,
    including the delete in replace mode.
    """
    mode = ImportMode(mode)
    drafts = run_parse(file_ref, settings, kind, mode)

    with Session(engine, expire_on_commit=False) as session:
        chapters = write_chapters(session, book_id, drafts, mode)
        session.commit()

    logger.info("Created %d chapter(s) for book %s", len(chapters), book_id)
    return chapters
