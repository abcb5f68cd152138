import io
import zipfile
from abc import abstractmethod

from doc2txt.exceptions import ArchiveError, ExtractionError
from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.extraction.xml_text import extract_xml_text
from doc2txt.logging.logger import Log


class ZippedXmlExtractor(BaseTextExtractor):
    """Extracts text from the XML entries of a zip container, in container order."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(raw_bytes)) as archive:
                parts = [
                    self._extract_entry(archive, info)
                    for info in archive.infolist()
                    if not info.is_dir() and self.wants(info.filename)
                ]
        except ExtractionError:
            raise
        except Exception as exc:
            raise ArchiveError(f"cannot open archive: {exc}") from exc
        return "".join(parts)

    @abstractmethod
    def wants(self, name: str) -> bool:
        """True for the entry names that hold document text."""

    def _extract_entry(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> str:
        try:
            data = archive.read(info)
        except Exception as exc:
            raise ArchiveError(f"cannot read entry '{info.filename}': {exc}") from exc
        Log.debug(f"Extracting archive entry {info.filename} ({len(data)} bytes)")
        return extract_xml_text(data)


class EpubExtractor(ZippedXmlExtractor):
    """Every .xhtml/.html entry of an EPUB book."""

    def wants(self, name: str) -> bool:
        return name.endswith((".xhtml", ".html"))


class DocxExtractor(ZippedXmlExtractor):
    """Only the main body part of a DOCX document."""

    BODY_ENTRY = "word/document.xml"

    def wants(self, name: str) -> bool:
        return name == self.BODY_ENTRY
