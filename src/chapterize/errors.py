"""Manuscript import errors"""


class ManuscriptError(Exception):
    """Base class for failures that stop a manuscript from being parsed."""


class UnsupportedFormat(ManuscriptError):
    """The file kind cannot be parsed; the caller must convert the file."""


class ExtractionFailed(ManuscriptError):
    """The file could not be opened or its text could not be read."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class EmptyManuscript(ManuscriptError):
    """The extracted text is too short to contain usable prose."""
