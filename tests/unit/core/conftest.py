"""Shared fixtures for core unit tests"""

import pytest


BODY_A = "A" * 60
BODY_B = "B" * 60

SAMPLE_MANUSCRIPT = f"""\
The Long Road Home
A novel in three parts, with a short dedication to everyone who waited.

Prologue

The night the river froze, nobody in the village slept. They gathered on the bank.

CHAPTER I: The Frost

Morning came slowly, pale light creeping over the ice and the silent houses.

Chapter 2. Thaw

{BODY_B}

## Afterword

A few words from the author about how the story came to be written down.
"""


@pytest.fixture(name="two_chapters")
def two_chapters_fixture() -> str:
    return "Chapter 1\n\n" + BODY_A + "\n\nChapter 2: The Return\n\n" + BODY_B


@pytest.fixture(name="manuscript")
def manuscript_fixture() -> str:
    return SAMPLE_MANUSCRIPT
