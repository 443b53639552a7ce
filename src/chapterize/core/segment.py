"""Chapter segmentation: split plain text into ordered ChapterDrafts by heading detection"""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterator

from chapterize.core.headings import NoMatch, classify_line
from chapterize.core.models import ChapterDraft
from chapterize.core.utils.slug import anchor_id
from chapterize.core.utils.tokens import word_count


logger = logging.getLogger(__name__)

IMPLICIT_TITLE = "Introduction"
FALLBACK_TITLE = "Chapter 1"


@dataclass
class RawSection:
    """A heading title and the untrimmed body lines that followed it."""
    title: str
    lines: list[str] = field(default_factory=list)
    implicit: bool = False          # opened by front matter, not by a heading

    @property
    def body(self) -> str:
        return "\n".join(self.lines).strip()


def split_sections(text: str) -> Iterator[RawSection]:
    """Yield one RawSection per recognized heading, in document order.

    Non-blank lines before the first heading open an implicit 'Introduction'.
    Blank lines before any section are skipped.
    """
    current: RawSection | None = None
    for line in text.split("\n"):
        heading = classify_line(line)
        if not isinstance(heading, NoMatch):
            if current is not None:
                yield current
            current = RawSection(heading.title)
        elif current is not None:
            current.lines.append(line)
        elif line.strip():
            current = RawSection(IMPLICIT_TITLE, [line], implicit=True)
    if current is not None:
        yield current


def _make_draft(title: str, content: str, number: int, slug_length: int) -> ChapterDraft:
    return ChapterDraft(
        title=title,
        content=content,
        chapter_number=number,
        anchor_id=anchor_id(title, number, slug_length),
        word_count=word_count(content),
        is_preview=number == 1,
    )


def close_section(
    drafts: tuple[ChapterDraft, ...],
    section: RawSection,
    min_chars: int = 50,
    slug_length: int = 30,
    ) -> tuple[ChapterDraft, ...]:
    """Append section as the next draft if its trimmed body is longer than min_chars."""
    body = section.body
    if len(body) <= min_chars:
        logger.debug("Discarded %r: body has %d chars", section.title, len(body))
        return drafts
    return drafts + (_make_draft(section.title, body, len(drafts) + 1, slug_length),)


def segment_chapters(text: str, min_chars: int = 50, slug_length: int = 30) -> list[ChapterDraft]:
    """Split text into chapters on recognized headings.

    Bodies of min_chars characters or fewer are dropped as noise. When the
    text has no recognized heading, or nothing survives, the whole trimmed
    text is returned as a single 'Chapter 1'.
    """
    sections = list(split_sections(text))
    drafts: tuple[ChapterDraft, ...] = ()
    if any(not s.implicit for s in sections):
        drafts = reduce(
            lambda acc, section: close_section(acc, section, min_chars, slug_length),
            sections,
            drafts,
        )
    if not drafts:
        return [_make_draft(FALLBACK_TITLE, text.strip(), 1, slug_length)]
    return list(drafts)
