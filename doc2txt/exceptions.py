from enum import Enum


class ExtractionError(Exception):
    """Base exception for every per-file conversion failure."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a file extension maps to no known format."""


class ArchiveError(ExtractionError):
    """Raised when a zip container cannot be opened or one of its entries cannot be read."""


class ParseStage(str, Enum):
    XML = "xml"
    HTML = "html"
    RTF = "rtf"


class ParseError(ExtractionError):
    """Raised when a document-model parser rejects the sanitized text."""

    def __init__(self, stage: ParseStage, message: str) -> None:
        super().__init__(f"{stage.value} parse failed: {message}")
        self.stage = stage


class DecodeError(ExtractionError):
    """Raised when the detected encoding cannot decode the buffer without substitution."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"decode errors with {encoding}")
        self.encoding = encoding


class FileReadError(ExtractionError):
    """Raised when a source file cannot be read from disk."""


class FileWriteError(ExtractionError):
    """Raised when an output file cannot be written or a file cannot be removed."""
