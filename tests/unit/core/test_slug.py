"""Unit tests for core/utils/slug.py"""

import pytest

from chapterize.core.utils.slug import anchor_id, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Chapter 2: The Return", "chapter-2-the-return"),
    ("Café Noir", "caf-noir"),
    ("!!!", ""),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify lowercases and collapses non-alphanumeric runs into single hyphens."""
    assert slugify(text) == expected


@pytest.mark.parametrize("title,number,expected", [
    ("Chapter 1", 1, "ch-1-chapter-1"),
    ("Chapter 2: The Return", 2, "ch-2-chapter-2-the-return"),
    ("Prologue", 7, "ch-7-prologue"),
    ("***", 3, "ch-3-untitled"),
    ("", 1, "ch-1-untitled"),
])
def test_anchor_id(title, number, expected):
    """anchor_id prefixes the slug with the chapter number."""
    assert anchor_id(title, number) == expected


def test_anchor_id_truncates_slug_to_30_chars():
    """Only the slug part is truncated, after leading/trailing hyphens are stripped."""
    title = "The Extraordinarily Long Title Of This Particular Chapter"
    result = anchor_id(title, 12)
    assert result == "ch-12-" + "the-extraordinarily-long-title"
    assert len(result) == len("ch-12-") + 30


def test_anchor_id_truncation_can_leave_trailing_hyphen():
    """Truncation happens after stripping, so a cut at a separator keeps the hyphen."""
    assert anchor_id("abcd efgh", 1, max_length=5) == "ch-1-abcd-"


def test_anchor_id_is_deterministic():
    """Same title and number always give the same id."""
    assert anchor_id("Interlude: Winter", 4) == anchor_id("Interlude: Winter", 4)
