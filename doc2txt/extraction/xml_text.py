"""Strict XML parsing and text-node collection shared by the XML-family formats."""

from lxml import etree

from doc2txt.exceptions import ParseError, ParseStage
from doc2txt.text.byte_decoder import decode_bytes
from doc2txt.text.xml_sanitizer import sanitize_xml


def _make_parser() -> etree.XMLParser:
    # The text is already decoded: force UTF-8 over whatever the prolog declares.
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=True,
    )


def parse_xml(text: str) -> etree._Element:
    """Parse sanitized text.

    Raises:
        ParseError: stage XML, if the parser rejects the document.
    """
    try:
        return etree.fromstring(text.encode("utf-8"), parser=_make_parser())
    except etree.XMLSyntaxError as exc:
        raise ParseError(ParseStage.XML, str(exc)) from exc


def collect_text_nodes(root: etree._Element) -> str:
    """Every non-empty text node in document order, each followed by one space."""
    return "".join(f"{node} " for node in root.xpath("//text()") if node)


def extract_xml_text(raw_bytes: bytes) -> str:
    """Decode -> sanitize -> parse -> collect, for one XML document."""
    return collect_text_nodes(parse_xml(sanitize_xml(decode_bytes(raw_bytes))))
