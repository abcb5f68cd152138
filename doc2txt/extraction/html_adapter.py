from bs4 import BeautifulSoup

from doc2txt.exceptions import ParseError, ParseStage
from doc2txt.extraction.base import BaseTextExtractor
from doc2txt.text.byte_decoder import decode_bytes
from doc2txt.text.xml_sanitizer import sanitize_html


class HtmlExtractor(BaseTextExtractor):
    """Extracts the text of the <body> element(s) using BeautifulSoup with lxml."""

    def extract(self, raw_bytes: bytes) -> str:
        text = sanitize_html(decode_bytes(raw_bytes))
        try:
            soup = BeautifulSoup(text, "lxml")
        except Exception as exc:
            raise ParseError(ParseStage.HTML, str(exc)) from exc
        bodies = soup.find_all("body") or [soup]
        return "".join(body.get_text(separator=" ") for body in bodies)
