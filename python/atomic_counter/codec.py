"""Percent-encoding and the key/value parser shared by cookies and form bodies."""

from __future__ import annotations

_SAFE_BYTES = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def percent_encode(value: str) -> str:
    """Encode every UTF-8 byte outside ``[A-Za-z0-9-_.~]`` as ``%XX``."""
    parts: list[str] = []
    for byte in value.encode("utf-8"):
        if byte in _SAFE_BYTES:
            parts.append(chr(byte))
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def percent_decode(value: str) -> str:
    """Decode ``%XX`` escapes and ``+`` as space.

    A ``%`` without two hex digits after it is kept literally. Invalid UTF-8
    in the decoded bytes becomes U+FFFD, so this never raises.
    """
    buffer = bytearray()
    i = 0
    length = len(value)
    while i < length:
        char = value[i]
        if char == "%":
            escape = value[i + 1 : i + 3]
            if len(escape) == 2 and all(c in _HEX_DIGITS for c in escape):
                buffer.append(int(escape, 16))
                i += 3
                continue
            buffer.append(ord("%"))
        elif char == "+":
            buffer.append(ord(" "))
        else:
            buffer.extend(char.encode("utf-8", errors="surrogatepass"))
        i += 1
    return buffer.decode("utf-8", errors="replace")


def parse_pairs(value: str | None, pair_sep: str, kv_sep: str) -> dict[str, str]:
    """Split ``value`` into a mapping of raw (undecoded) values.

    Keys are stripped of surrounding spaces. Segments without ``kv_sep`` or
    with an empty key are skipped. When a key repeats, the first occurrence
    wins.
    """
    pairs: dict[str, str] = {}
    if not value:
        return pairs

    for segment in value.split(pair_sep):
        key, sep, raw = segment.partition(kv_sep)
        if not sep:
            continue
        key = key.strip(" ")
        if not key or key in pairs:
            continue
        pairs[key] = raw
    return pairs


def parse_cookie_header(header: str | None) -> dict[str, str]:
    return parse_pairs(header, ";", "=")


def parse_form_body(body: str | None) -> dict[str, str]:
    return parse_pairs(body, "&", "=")
