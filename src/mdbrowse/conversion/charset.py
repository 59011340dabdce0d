"""Response body decoding driven by the declared Content-Type charset."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"

_CHARSET_RE = re.compile(r"charset=([^;]+)", re.IGNORECASE)

# Browsers decode these labels as windows-1252
_WINDOWS_1252_LABELS = frozenset(
    {
        "ascii",
        "us-ascii",
        "iso-8859-1",
        "iso8859-1",
        "iso_8859-1",
        "latin1",
        "latin-1",
        "l1",
        "cp819",
        "ibm819",
        "windows-1252",
        "x-cp1252",
    }
)

_BOM = "\ufeff"


def get_charset(content_type: str | None) -> str:
    """
    Extract the charset parameter from a Content-Type header value.

    Args:
        content_type: Content-Type header value (may be empty)

    Returns:
        Lower-cased charset name without quotes, ``utf-8`` when absent
    """
    if not content_type:
        return DEFAULT_CHARSET
    match = _CHARSET_RE.search(content_type)
    if not match:
        return DEFAULT_CHARSET
    charset = match.group(1).strip().replace('"', "").replace("'", "").lower()
    return charset or DEFAULT_CHARSET


def _codec_for(charset: str) -> str:
    if charset in _WINDOWS_1252_LABELS:
        return "cp1252"
    return charset


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith(_BOM) else text


def decode_body(content: bytes, content_type: str | None) -> str:
    """
    Decode a response body using the declared charset.

    Fallback chain:
    1. Content-Type header charset (strict), Latin-1 and ASCII labels
       read as windows-1252
    2. UTF-8 with replacement characters

    A leading byte-order mark is dropped.

    Args:
        content: Raw response bytes
        content_type: Content-Type header value

    Returns:
        Decoded text, never raises
    """
    charset = get_charset(content_type)
    try:
        return _strip_bom(content.decode(_codec_for(charset)))
    except (UnicodeDecodeError, LookupError) as e:
        logger.debug(f"Failed to decode with declared charset {charset!r}: {e}")
    return _strip_bom(content.decode(DEFAULT_CHARSET, errors="replace"))
