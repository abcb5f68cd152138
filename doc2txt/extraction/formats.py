from enum import Enum
from pathlib import Path


class Format(str, Enum):
    """Document formats the converter knows, chosen once per file from its extension."""

    EPUB = "epub"
    FB2 = "fb2"
    DOCX = "docx"
    RTF = "rtf"
    HTML = "html"
    PLAIN_TEXT = "txt"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_extension(cls, extension: str) -> "Format":
        return _EXTENSIONS.get(extension.lower().lstrip("."), cls.UNSUPPORTED)

    @classmethod
    def from_path(cls, path: Path) -> "Format":
        return cls.from_extension(path.suffix)


_EXTENSIONS: dict[str, Format] = {
    "epub": Format.EPUB,
    "fb2": Format.FB2,
    "docx": Format.DOCX,
    "rtf": Format.RTF,
    "html": Format.HTML,
    "htm": Format.HTML,
    "txt": Format.PLAIN_TEXT,
}
