from striprtf.striprtf import rtf_to_text

from doc2txt.exceptions import ParseError, ParseStage
from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.text.byte_decoder import decode_bytes
from doc2txt.text.rtf_escapes import decode_rtf_escapes


class RtfExtractor(BaseTextExtractor):
    """Extracts text from RTF using striprtf, after resolving \\'xx escapes."""

    def extract(self, raw_bytes: bytes) -> str:
        source = decode_bytes(raw_bytes).strip().rstrip("\0")
        resolved = decode_rtf_escapes(source)
        try:
            return rtf_to_text(resolved)
        except Exception as exc:
            raise ParseError(ParseStage.RTF, str(exc)) from exc
