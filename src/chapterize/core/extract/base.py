"""Text extractor interface"""

from abc import ABC, abstractmethod


class TextExtractor(ABC):
    """Turns the raw bytes of one supported file kind into plain text."""

    @abstractmethod
    def extract(self, buffer: bytes) -> str:
        raise NotImplementedError
