"""Extractor registry: map a FileKind to the adapter that turns its bytes into text"""

from chapterize.core.extract.base import TextExtractor
from chapterize.core.extract.docx import DocxExtractor
from chapterize.core.extract.plain import PlainTextExtractor
from chapterize.core.models import FileKind
from chapterize.errors import UnsupportedFormat


EXTRACTORS: dict[FileKind, TextExtractor] = {
    FileKind.text:     PlainTextExtractor(),
    FileKind.markdown: PlainTextExtractor(),
    FileKind.docx:     DocxExtractor(),
}


def get_extractor(kind: FileKind | str) -> TextExtractor:
    """Return the extractor for kind. Raises UnsupportedFormat for epub, pdf and unknown kinds."""
    try:
        kind = FileKind(kind)
    except ValueError:
        raise UnsupportedFormat("Unsupported file format. Use DOCX, TXT, or MD.") from None
    if kind not in EXTRACTORS:
        raise UnsupportedFormat(f"{kind.value.upper()} format not supported. Please convert to DOCX, TXT, or MD.")
    return EXTRACTORS[kind]


def extract_text(buffer: bytes, kind: FileKind | str) -> str:
    """Extract plain text from buffer according to its declared kind."""
    return get_extractor(kind).extract(buffer)
