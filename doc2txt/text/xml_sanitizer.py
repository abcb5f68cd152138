"""Make decoded markup acceptable to a strict XML parser.

Legacy exports often carry internal DTD subsets the parser does not support,
stray control characters, or NUL padding. None of that is repaired: it is
removed, and the handful of named entities such DTDs used to supply is put back.
"""

import re

_DOCTYPE = "<!DOCTYPE"

# Complement of the XML 1.0 Char production: C0 controls except tab/LF/CR, lone surrogates, U+FFFE, U+FFFF.
_INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

# &amp; goes last so "&amp;lt;" becomes "&lt;" and not "<".
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", "\u00a0"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),
)


def sanitize_xml(text: str) -> str:
    """Strip DTDs and disallowed characters; never fails.

    Passes repeat until the text stops changing, so sanitizing twice equals
    sanitizing once. Each pass either returns its input or a shorter string.
    """
    while True:
        cleaned = _sanitize_pass(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def sanitize_html(text: str) -> str:
    """Trim and character-filter only; lenient HTML parsers cope with the rest."""
    while True:
        cleaned = clean_invalid_xml_chars(_trim(text))
        if cleaned == text:
            return cleaned
        text = cleaned


def _sanitize_pass(text: str) -> str:
    text = _trim(text)
    text, had_dtd = remove_dtd(text)
    if had_dtd:
        text = restore_entities(text)
    return clean_invalid_xml_chars(text)


def _trim(text: str) -> str:
    return text.strip().rstrip("\0")


def remove_dtd(text: str) -> tuple[str, bool]:
    """Remove every <!DOCTYPE ...> declaration.

    An internal subset ("[ ... ]") is skipped as a whole before looking for the
    closing ">". An unterminated declaration drops everything from its marker on.

    Returns:
        The remaining text and whether any declaration was found.
    """
    found = False
    start = text.find(_DOCTYPE)
    while start != -1:
        found = True
        end = _declaration_end(text, start + len(_DOCTYPE))
        if end == -1:
            return text[:start], found
        text = text[:start] + text[end + 1:]
        start = text.find(_DOCTYPE)
    return text, found


def _declaration_end(text: str, pos: int) -> int:
    """Index of the ">" closing a declaration whose body starts at pos, or -1."""
    close = text.find(">", pos)
    subset = text.find("[", pos)
    if subset == -1 or (close != -1 and close < subset):
        return close
    subset_end = text.find("]", subset + 1)
    if subset_end == -1:
        return -1
    return text.find(">", subset_end + 1)


def restore_entities(text: str) -> str:
    for entity, literal in _ENTITIES:
        text = text.replace(entity, literal)
    return text


def clean_invalid_xml_chars(text: str) -> str:
    """Drop every code point outside the XML 1.0 Char production."""
    return _INVALID_XML_CHARS.sub("", text)
