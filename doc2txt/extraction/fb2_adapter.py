from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.extraction.xml_text import extract_xml_text


class Fb2Extractor(BaseTextExtractor):
    """Extracts text from a FictionBook (FB2) file, a single XML document."""

    def extract(self, raw_bytes: bytes) -> str:
        return extract_xml_text(raw_bytes)
