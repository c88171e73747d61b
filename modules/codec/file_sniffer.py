"""Magic-number based file type detection for previews and downloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from modules.codec.base64_codec import to_data_url

FALLBACK_MIME = "application/octet-stream"

_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG", "image/png"),
    (b"GIF", "image/gif"),
    (b"%PDF", "application/pdf"),
)

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
    "application/pdf": ".pdf",
    "text/html": ".html",
    "text/plain": ".txt",
    FALLBACK_MIME: ".bin",
}

# alternative spellings that already satisfy the extension requirement
_EXTENSION_ALIASES = {
    "image/jpeg": (".jpg", ".jpeg"),
    "text/html": (".html", ".htm"),
}

_TEXT_CONTROL_BYTES = frozenset((9, 10, 13))


class PreviewKind(str, Enum):
    """How decoded content can be rendered."""

    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    NONE = "none"


@dataclass(slots=True)
class FilePreview:
    """Preview payload derived from decoded bytes."""

    mime_type: str
    kind: PreviewKind
    size: int
    text: Optional[str] = None
    data_url: Optional[str] = None


def _is_printable(data: bytes) -> bool:
    return all(byte >= 0x20 or byte in _TEXT_CONTROL_BYTES for byte in data)


def sniff_mime_type(data: bytes) -> str:
    """Guess the MIME type of decoded bytes from their first bytes.

    Unknown or empty content maps to FALLBACK_MIME.
    """
    if not data:
        return FALLBACK_MIME

    head = data[:4]
    for signature, mime_type in _SIGNATURES:
        if head.startswith(signature):
            return mime_type

    if len(head) >= 2 and head[0] == 0x3C and head[1] in (0x3F, 0x21):
        return "image/svg+xml" if b"<svg" in data else "text/html"

    if _is_printable(data):
        return "text/plain"
    return FALLBACK_MIME


def preview_kind(mime_type: str) -> PreviewKind:
    """Map a MIME type onto the preview widget able to show it."""
    if mime_type.startswith("image/"):
        return PreviewKind.IMAGE
    if mime_type == "application/pdf":
        return PreviewKind.PDF
    if mime_type in ("text/plain", "text/html"):
        return PreviewKind.TEXT
    return PreviewKind.NONE


def extension_for(mime_type: str) -> str:
    """Return the preferred file extension for a MIME type."""
    return _EXTENSIONS.get(mime_type, _EXTENSIONS[FALLBACK_MIME])


def download_name(base_name: str, mime_type: str) -> str:
    """Append the extension implied by mime_type unless base_name has it."""
    accepted = _EXTENSION_ALIASES.get(mime_type, (extension_for(mime_type),))
    if base_name.lower().endswith(accepted):
        return base_name
    return base_name + extension_for(mime_type)


def build_preview(data: bytes) -> FilePreview:
    """Classify decoded bytes and prepare what the preview panel renders."""
    mime_type = sniff_mime_type(data)
    kind = preview_kind(mime_type)
    preview = FilePreview(mime_type=mime_type, kind=kind, size=len(data))
    if kind in (PreviewKind.IMAGE, PreviewKind.PDF):
        preview.data_url = to_data_url(data, mime_type)
    elif kind is PreviewKind.TEXT:
        preview.text = data.decode("utf-8", errors="replace")
    return preview
