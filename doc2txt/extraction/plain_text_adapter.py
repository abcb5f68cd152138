from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.text.byte_decoder import decode_bytes


class PlainTextExtractor(BaseTextExtractor):
    """Re-encodes a plain text file; no structural extraction."""

    def extract(self, raw_bytes: bytes) -> str:
        return decode_bytes(raw_bytes).strip()
