"""Unit tests for core/headings.py"""

import pytest

from chapterize.core.headings import (
    MarkdownHeading, NamedSection, NoMatch, NumberedChapter, classify_line,
)


@pytest.mark.parametrize("line,expected", [
    ("Chapter 1", NumberedChapter("1")),
    ("CHAPTER 12", NumberedChapter("12")),
    ("chapter iv", NumberedChapter("iv")),
    ("Chapter XIV: The Storm", NumberedChapter("XIV", "The Storm")),
    ("Chapter 3. Homecoming", NumberedChapter("3", "Homecoming")),
    ("Chapter 7 The Gate", NumberedChapter("7", "The Gate")),
    ("  Chapter 2  ", NumberedChapter("2")),
])
def test_classify_numbered_chapter(line, expected):
    """Chapter + arabic or roman numeral, with an optional trailing fragment."""
    assert classify_line(line) == expected


@pytest.mark.parametrize("line,expected", [
    ("Prologue", NamedSection("Prologue")),
    ("EPILOGUE", NamedSection("EPILOGUE")),
    ("Interlude: Winter", NamedSection("Interlude", "Winter")),
    ("preface.", NamedSection("preface")),
])
def test_classify_named_section(line, expected):
    """Named sections match case-insensitively with an optional fragment."""
    assert classify_line(line) == expected


@pytest.mark.parametrize("line,text", [
    ("# Part One", "Part One"),
    ("## The Letter", "The Letter"),
    ("##   Spaced   ", "Spaced"),
])
def test_classify_markdown_heading(line, text):
    """One or two leading hashes followed by whitespace and text."""
    assert classify_line(line) == MarkdownHeading(text)


@pytest.mark.parametrize("line", [
    "",
    "   ",
    "### Too deep",
    "#NoSpace",
    "Chapter",
    "Chapter One",
    "The chapter 1 of our lives",
    "Prologues are overrated",
    "Just an ordinary sentence.",
])
def test_classify_no_match(line):
    """Ordinary prose and near-miss headings are not classified."""
    assert isinstance(classify_line(line), NoMatch)


def test_numbered_chapter_wins_over_markdown():
    """A numbered chapter is tested before a markdown heading."""
    assert isinstance(classify_line("Chapter 5: # weird"), NumberedChapter)


def test_markdown_prologue_is_markdown_heading():
    """'## Prologue' is a markdown heading whose text is 'Prologue'."""
    heading = classify_line("## Prologue")
    assert isinstance(heading, MarkdownHeading)
    assert heading.title == "Prologue"


@pytest.mark.parametrize("line,title", [
    ("Chapter 1", "Chapter 1"),
    ("Chapter 2: The Return", "Chapter 2: The Return"),
    ("CHAPTER IV - Dawn", "Chapter IV: - Dawn"),
    ("PROLOGUE", "Prologue"),
    ("epilogue: After", "Epilogue: After"),
    ("# Part One", "Part One"),
])
def test_heading_titles(line, title):
    """Titles are built from the captured parts; section names are title-cased."""
    assert classify_line(line).title == title
