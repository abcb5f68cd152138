from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all per-format text extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Extract plain text from a whole document buffer.

        Args:
            raw_bytes: Raw file content, encoding unknown.

        Returns:
            Extracted text; empty when the document holds no text.

        Raises:
            ExtractionError: a typed subclass naming the failing stage.
        """
