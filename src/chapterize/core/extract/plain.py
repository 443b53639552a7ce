"""Plain text and Markdown extraction"""

from chapterize.core.extract.base import TextExtractor


class PlainTextExtractor(TextExtractor):
    """Decode bytes as UTF-8 without further transformation.

    A leading byte order mark is dropped and undecodable bytes are replaced.
    """

    def extract(self, buffer: bytes) -> str:
        return buffer.decode("utf-8-sig", errors="replace")
