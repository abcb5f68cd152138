from string import hexdigits

from doc2txt.text.byte_decoder import detect_and_decode

_HEX_DIGITS = frozenset(hexdigits)


def decode_rtf_escapes(rtf: str) -> str:
    r"""Resolve every \'xx escape into the byte it names and re-decode the result.

    Escaped bytes come from the document's legacy code page, so the rebuilt
    buffer is never assumed to be UTF-8; it goes through charset detection.

    Raises:
        DecodeError: if the detected encoding cannot decode the rebuilt buffer.
    """
    return detect_and_decode(resolve_rtf_escapes(rtf))


def resolve_rtf_escapes(rtf: str) -> bytes:
    r"""Single left-to-right scan turning \'xx into raw bytes.

    Malformed escapes (missing or non-hex digits) are kept literally, including
    whichever of the two following characters were consumed.
    """
    out = bytearray()
    i = 0
    n = len(rtf)
    while i < n:
        ch = rtf[i]
        if ch == "\\" and i + 1 < n and rtf[i + 1] == "'":
            digits = rtf[i + 2:i + 4]
            i += 2 + len(digits)
            if len(digits) == 2 and all(d in _HEX_DIGITS for d in digits):
                out.append(int(digits, 16))
            else:
                out += ("\\'" + digits).encode("utf-8")
            continue
        out += ch.encode("utf-8")
        i += 1
    return bytes(out)
