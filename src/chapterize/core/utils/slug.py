"""Slug generation for chapter anchor identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Lowercase text and collapse every run of non-alphanumerics into one hyphen."""
    return _NON_ALNUM_RE.sub('-', text.lower()).strip('-')


def anchor_id(title: str, chapter_number: int, max_length: int = 30) -> str:
    """Return a stable anchor id of the form 'ch-<n>-<slug>'.

    The slug is truncated after stripping, so a cut may leave a trailing hyphen.
    An empty slug becomes 'untitled'.
    """
    slug = slugify(title)[:max_length]
    return f"ch-{chapter_number}-{slug or 'untitled'}"
