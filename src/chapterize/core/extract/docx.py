"""Office Open XML (.docx) text extraction"""

import io
import logging
import re
from xml.sax.saxutils import unescape

from docx import Document

from chapterize.core.extract.base import TextExtractor
from chapterize.errors import ExtractionFailed


logger = logging.getLogger(__name__)

# A paragraph ends at its close tag; an empty one may be serialized self-closing.
PARAGRAPH_END_RE = re.compile(r'</w:p>|<w:p(?:\s[^>]*)?/>')
TEXT_RUN_RE = re.compile(r'<w:t[^>]*>([^<]*)</w:t>')
XML_ENTITIES = {"&quot;": '"', "&apos;": "'"}


def paragraphs_from_xml(document_xml: str) -> list[str]:
    """Return the text of each paragraph in document order.

    Runs inside a paragraph are concatenated; paragraphs without runs are kept
    as empty strings so blank-line spacing survives.
    """
    return [
        "".join(unescape(run, XML_ENTITIES) for run in TEXT_RUN_RE.findall(chunk))
        for chunk in PARAGRAPH_END_RE.split(document_xml)
    ]


def read_document_xml(buffer: bytes) -> str:
    """Open buffer as a Word package and return its main document part as XML.

    Any failure to open the package or read the part (not a zip, encrypted or
    truncated entries, bad offsets, missing part, malformed XML) is raised as
    ExtractionFailed chained to the original error.
    """
    try:
        document = Document(io.BytesIO(buffer))
        return document.part.blob.decode("utf-8")
    except Exception as e:
        raise ExtractionFailed(f"Failed to extract DOCX content: {e}", e) from e


class DocxExtractor(TextExtractor):
    """Read the main document part of a .docx package and join its paragraphs with blank lines."""

    def extract(self, buffer: bytes) -> str:
        paragraphs = paragraphs_from_xml(read_document_xml(buffer))
        logger.debug("Read %d paragraph(s) from the main document part", len(paragraphs))
        return "\n\n".join(paragraphs)
