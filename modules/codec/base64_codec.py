"""UTF-8 aware Base64 helpers."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/=]+")
_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?;base64,", re.IGNORECASE)


def encode_text(text: str) -> str:
    """Encode text as Base64 using its UTF-8 bytes.

    Returns an empty string when the text cannot be encoded, e.g. lone
    surrogates coming from a broken clipboard payload.
    """
    try:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")
    except (UnicodeEncodeError, AttributeError) as exc:
        logger.error("Encoding error: %s", exc)
        return ""


def decode_text(data: str) -> str:
    """Decode a Base64 string into UTF-8 text, or return an empty string."""
    try:
        raw = base64.b64decode(data.strip(), validate=True)
    except (binascii.Error, ValueError, AttributeError) as exc:
        logger.error("Decoding error: %s", exc)
        return ""
    # invalid sequences become U+FFFD instead of failing the whole decode
    return raw.decode("utf-8", errors="replace")


def encode_bytes(data: bytes) -> str:
    """Encode raw bytes (file or image content) as Base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_bytes(data: str) -> bytes:
    """Decode Base64 text into raw bytes.

    Raises:
        ValueError: if the payload is not valid Base64.
    """
    compact = "".join(data.split())
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid Base64 data: {exc}") from exc


def is_base64(value: str) -> bool:
    """Return True when value looks like Base64.

    This is a structural check on the alphabet and the length only; a string
    passing it may still fail to decode (misplaced padding, for instance).
    """
    if not value:
        return False
    return bool(_BASE64_PATTERN.fullmatch(value)) and len(value) % 4 == 0


def strip_data_url(value: str) -> Tuple[Optional[str], str]:
    """Split a ``data:<mime>;base64,`` URL into its MIME type and payload."""
    stripped = value.strip()
    match = _DATA_URL_PATTERN.match(stripped)
    if match is None:
        return None, stripped
    return match.group("mime"), stripped[match.end():].strip()


def to_data_url(data: bytes, mime_type: str) -> str:
    """Build a data URL for inline previews."""
    return f"data:{mime_type};base64,{encode_bytes(data)}"


def format_file_size(size: int) -> str:
    """Human readable size, matching the labels shown in history entries."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
