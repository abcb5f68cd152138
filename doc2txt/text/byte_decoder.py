"""Byte buffer -> text, with a fixed priority chain.

1. UTF-16 byte-order mark: decode in the marked byte order, replacing broken units.
2. Valid UTF-8: use as is.
3. Anything else: one chardet pass over the whole buffer, then a strict decode.
   A guess that needs substitution is reported as DecodeError, never patched up.
"""

import codecs

import chardet

from doc2txt.exceptions import DecodeError
from doc2txt.logging.logger import Log

_UTF16_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def decode_bytes(data: bytes) -> str:
    """Decode a raw document buffer into text.

    Raises:
        DecodeError: if the buffer is neither BOM-marked UTF-16 nor valid UTF-8
            and the detected encoding cannot decode it cleanly.
    """
    for bom, codec in _UTF16_BOMS:
        if data.startswith(bom):
            return data[len(bom):].decode(codec, errors="replace")
    if is_utf8(data):
        return data.decode("utf-8")
    return detect_and_decode(data)


def is_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def detect_and_decode(data: bytes) -> str:
    """Guess the encoding of the whole buffer and decode it strictly.

    Raises:
        DecodeError: carrying the guessed encoding name ("unknown" when chardet
            has no guess) if strict decoding fails.
    """
    if not data:
        return ""
    guess = chardet.detect(data)
    encoding = guess.get("encoding")
    if not encoding:
        raise DecodeError("unknown")
    Log.debug(f"Detected {encoding} (confidence {guess.get('confidence', 0.0):.2f})")
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise DecodeError(encoding) from exc
