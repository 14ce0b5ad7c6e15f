"""src/reqtarget/utils/percent.py

Percent-decoding helpers for reqtarget.
"""

import urllib.parse

__all__ = ["percent_decode"]


def percent_decode(text: str, plus_as_space: bool = False) -> str:
    """
    Decode %XX escapes in a query key or value.

    Consecutive escaped bytes are reassembled as UTF-8, so a four byte
    sequence such as ``%F0%9F%98%80`` yields a single code point.

    Malformed escapes (``%``, ``%4``, ``%zz``) are kept as literal text and
    byte runs that are not valid UTF-8 become U+FFFD. This function never
    raises for ``str`` input.

    Args:
        text: Raw key or value taken from a query string.
        plus_as_space: Decode ``+`` as a space (HTML form encoding).
            Off by default: a literal ``+`` is returned unchanged.

    Returns:
        The decoded string.
    """
    if plus_as_space:
        if "%" not in text and "+" not in text:
            return text
        return urllib.parse.unquote_plus(text, encoding="utf-8", errors="replace")

    if "%" not in text:
        return text
    return urllib.parse.unquote(text, encoding="utf-8", errors="replace")
