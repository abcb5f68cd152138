import io
import zipfile
from pathlib import Path

import pytest


def _zip(entries: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buf.getvalue()


@pytest.fixture()
def library(tmp_path: Path) -> Path:
    """A messy book folder: every supported format, trash, a corrupt archive and empty entries."""
    root = tmp_path / "library"
    fiction = root / "fiction"
    fiction.mkdir(parents=True)
    (root / "scans" / "old").mkdir(parents=True)

    (fiction / "book.epub").write_bytes(
        _zip(
            {
                "mimetype": b"application/epub+zip",
                "OEBPS/ch1.xhtml": b"<html><body><p>Hello</p><p>World</p></body></html>",
            }
        )
    )
    (fiction / "story.fb2").write_bytes(
        b"\xff\xfe"
        + (
            '<?xml version="1.0" encoding="utf-16"?>'
            "<FictionBook><body><p>Жили-были</p></body></FictionBook>"
        ).encode("utf-16-le")
    )
    (root / "report.docx").write_bytes(
        _zip({"word/document.xml": b"<document><body><t>Quarterly numbers</t></body></document>"})
    )
    (root / "note.rtf").write_bytes(b"{\\rtf1\\ansi Caf\\'e9 au lait\\par}")
    (root / "page.html").write_bytes(
        b"<html><head><title>T</title></head><body><p>Web page</p></body></html>"
    )
    (root / "legacy.txt").write_bytes(b"\xff\xfe" + "old notes".encode("utf-16-le"))
    (root / "broken.epub").write_bytes(b"PK\x03\x04 truncated")
    (root / "photo.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "readme.md").write_bytes(b"# keep me")
    (root / "blank.dat").write_bytes(b"")
    return root
