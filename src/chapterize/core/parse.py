"""Manuscript parsing: file kind detection, text extraction, and chapter segmentation"""

import logging
from pathlib import Path

from chapterize.core.extract.extract import extract_text
from chapterize.core.models import ChapterDraft, FileKind, ImportMode
from chapterize.core.segment import segment_chapters
from chapterize.errors import EmptyManuscript, UnsupportedFormat


logger = logging.getLogger(__name__)

KIND_BY_SUFFIX: dict[str, FileKind] = {
    '.txt':  FileKind.text,
    '.md':   FileKind.markdown,
    '.docx': FileKind.docx,
    '.epub': FileKind.epub,
    '.pdf':  FileKind.pdf,
}


def kind_from_path(path: str | Path) -> FileKind:
    """Infer the FileKind from a file name suffix (case-insensitive)."""
    kind = KIND_BY_SUFFIX.get(Path(path).suffix.lower())
    if kind is None:
        raise UnsupportedFormat("Unsupported file format. Use DOCX, TXT, or MD.")
    return kind


def parse_manuscript(
    buffer: bytes,
    kind: FileKind | str,
    mode: ImportMode | str = ImportMode.add,
    min_manuscript_chars: int = 100,
    min_chapter_chars: int = 50,
    slug_length: int = 30,
    ) -> list[ChapterDraft]:
    """Extract text from buffer and split it into chapter drafts.

    The result is never empty. Raises UnsupportedFormat, ExtractionFailed or
    EmptyManuscript; never returns partial output. mode is validated here but
    only matters to the writer.
    """
    mode = ImportMode(mode)
    text = extract_text(buffer, kind)
    logger.info("Extracted %d chars from %s manuscript", len(text), FileKind(kind).value)

    if len(text.strip()) < min_manuscript_chars:
        raise EmptyManuscript("Could not extract meaningful content from the file. Please check the file format.")

    drafts = segment_chapters(text, min_chapter_chars, slug_length)
    logger.info("Chapters detected: %d (mode=%s)", len(drafts), mode.value)
    return drafts
