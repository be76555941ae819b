"""URL encoding in GB2312 or UTF-8, and conversion between the two."""

from __future__ import annotations

# GBK is the superset used by Chinese systems for "GB2312" text.
_GB_CODEC = "gbk"
_SPACES = b" \t\n\v\f\r"
_HEX_DIGITS = "0123456789abcdefABCDEF"


def gb2312_to_utf8(data: bytes) -> bytes:
    """Re-encode GB2312 bytes as UTF-8."""
    return data.decode(_GB_CODEC).encode("utf-8")


def utf8_to_gb2312(data: bytes) -> bytes:
    """Re-encode UTF-8 bytes as GB2312."""
    return data.decode("utf-8").encode(_GB_CODEC)


def _percent_encode(data: bytes) -> str:
    parts = []
    for byte in data:
        char = chr(byte)
        if byte < 0x80 and char.isalnum():
            parts.append(char)
        elif byte in _SPACES:
            parts.append("+")
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def _percent_decode(text: str, encoding: str) -> bytes:
    out = bytearray()
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "%":
            digits = text[pos + 1 : pos + 3]
            if len(digits) != 2 or any(d not in _HEX_DIGITS for d in digits):
                raise ValueError(f"malformed escape at position {pos}: {text[pos:pos + 3]!r}")
            out.append(int(digits, 16))
            pos += 3
        elif char == "+":
            out.append(0x20)
            pos += 1
        else:
            out.extend(char.encode(encoding))
            pos += 1
    return bytes(out)


def url_encode_gb2312(text: str) -> str:
    """URL-encode ``text`` as GB2312: letters and digits kept, spaces as '+'."""
    return _percent_encode(text.encode(_GB_CODEC))


def url_encode_utf8(text: str) -> str:
    """URL-encode ``text`` as UTF-8: letters and digits kept, spaces as '+'."""
    return _percent_encode(text.encode("utf-8"))


def url_decode_gb2312(text: str) -> str:
    """Decode a GB2312 URL-encoded string."""
    return _percent_decode(text, _GB_CODEC).decode(_GB_CODEC)


def url_decode_utf8(text: str) -> str:
    """Decode a UTF-8 URL-encoded string."""
    return _percent_decode(text, "utf-8").decode("utf-8")