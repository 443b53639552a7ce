"""Heading classification for manuscript lines

Each line is tested against an ordered list of heading patterns; the first
match wins and is returned as a typed variant carrying its captured parts.
"""

import re
from dataclasses import dataclass
from typing import Callable, Union


NUMBERED_CHAPTER_RE = re.compile(r'^(?:Chapter|CHAPTER)\s+(\d+|[IVXLC]+)(?:[:.\s]+(.*))?$', re.IGNORECASE)
NAMED_SECTION_RE = re.compile(r'^(Prologue|Epilogue|Interlude|Introduction|Preface)(?:[:.\s]+(.*))?$', re.IGNORECASE)
MARKDOWN_HEADING_RE = re.compile(r'^#{1,2}\s+(.+)$')


@dataclass(frozen=True)
class NumberedChapter:
    num: str
    fragment: str = ""

    @property
    def title(self) -> str:
        if self.fragment:
            return f"Chapter {self.num}: {self.fragment}"
        return f"Chapter {self.num}"


@dataclass(frozen=True)
class NamedSection:
    name: str
    fragment: str = ""

    @property
    def title(self) -> str:
        name = self.name.capitalize()
        return f"{name}: {self.fragment}" if self.fragment else name


@dataclass(frozen=True)
class MarkdownHeading:
    text: str

    @property
    def title(self) -> str:
        return self.text


@dataclass(frozen=True)
class NoMatch:
    pass


Heading = Union[NumberedChapter, NamedSection, MarkdownHeading]


def _fragment(m: re.Match) -> str:
    return (m.group(2) or "").strip()


# Priority order: numbered chapters, then named sections, then markdown headings.
HEADING_PATTERNS: list[tuple[re.Pattern, Callable[[re.Match], Heading]]] = [
    (NUMBERED_CHAPTER_RE, lambda m: NumberedChapter(num=m.group(1), fragment=_fragment(m))),
    (NAMED_SECTION_RE,    lambda m: NamedSection(name=m.group(1), fragment=_fragment(m))),
    (MARKDOWN_HEADING_RE, lambda m: MarkdownHeading(text=m.group(1).strip())),
]


def classify_line(line: str) -> Heading | NoMatch:
    """Return the heading variant for a line, or NoMatch. The line is trimmed first."""
    stripped = line.strip()
    for pattern, build in HEADING_PATTERNS:
        m = pattern.match(stripped)
        if m:
            return build(m)
    return NoMatch()
