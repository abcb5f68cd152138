import io
import zipfile
from collections.abc import Callable

import pytest

ZipBuilder = Callable[[dict[str, bytes]], bytes]


def _build_zip(entries: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buf.getvalue()


@pytest.fixture()
def make_zip() -> ZipBuilder:
    """Build an in-memory zip container from {entry name: content}."""
    return _build_zip


@pytest.fixture()
def epub_bytes() -> bytes:
    """Minimal EPUB with one chapter plus non-text entries."""
    return _build_zip(
        {
            "mimetype": b"application/epub+zip",
            "META-INF/container.xml": b"<container><rootfiles/></container>",
            "text/ch1.xhtml": b"<html><body>Hello <b>World</b></body></html>",
            "images/cover.jpg": b"\xff\xd8\xff\xe0 not really a jpeg",
        }
    )


@pytest.fixture()
def docx_bytes() -> bytes:
    """Minimal DOCX: a body part and a styles part that must be ignored."""
    ns = b'xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"'
    return _build_zip(
        {
            "[Content_Types].xml": b"<Types/>",
            "word/document.xml": (
                b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
                b"<w:document " + ns + b"><w:body>"
                b"<w:p><w:r><w:t>First paragraph</w:t></w:r></w:p>"
                b"<w:p><w:r><w:t>Second paragraph</w:t></w:r></w:p>"
                b"</w:body></w:document>"
            ),
            "word/styles.xml": b"<w:styles " + ns + b"><w:t>style text</w:t></w:styles>",
        }
    )


@pytest.fixture()
def fb2_utf16_bytes() -> bytes:
    """FB2 saved as UTF-16 LE with a byte-order mark."""
    text = (
        '<?xml version="1.0" encoding="utf-16"?>'
        "<FictionBook><body><section><p>Привет, мир</p></section></body></FictionBook>"
    )
    return b"\xff\xfe" + text.encode("utf-16-le")


@pytest.fixture()
def rtf_bytes() -> bytes:
    return rb"{\rtf1\ansi\deff0 {\fonttbl {\f0 Times;}}\f0 Hello \'41\'42 world\par}"


@pytest.fixture()
def html_bytes() -> bytes:
    return (
        b"<!DOCTYPE html><html><head><title>Title</title></head>"
        b"<body><h1>Heading</h1><p>Some &amp; text\x0b here</p></body></html>"
    )
