from pathlib import Path

from doc2txt.exceptions import FileReadError


class FileLoader:
    """Reads a source document's bytes from disk."""

    def load(self, path: Path) -> bytes:
        """Read the whole file.

        Raises:
            FileReadError: if the file is missing or unreadable.
        """
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
