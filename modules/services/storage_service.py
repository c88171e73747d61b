"""File storage helpers for downloads."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Optional

from modules.codec.file_sniffer import download_name, sniff_mime_type

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w.\- ]+")


def _safe_stem(name: Optional[str], default: str) -> str:
    cleaned = _UNSAFE_CHARS.sub("_", Path(name or "").name).strip(" .")
    return cleaned or default


class StorageService:
    """Write downloadable artifacts and keep the folder small."""

    def __init__(self, output_dir: Path, max_items: int = 20) -> None:
        self.output_dir = Path(output_dir)
        self.max_items = max_items

    def _target_path(self, file_name: str) -> Path:
        # a per-call folder keeps the user-facing name intact
        folder = self.output_dir / f"{int(time.time() * 1000)}"
        suffix = 0
        while folder.exists():
            suffix += 1
            folder = self.output_dir / f"{int(time.time() * 1000)}-{suffix}"
        folder.mkdir(parents=True)
        return folder / file_name

    def save_encoded_text(self, encoded: str, original_name: Optional[str] = None) -> Path:
        """Persist Base64 text as ``<name>-encoded.txt`` (or ``encoded.txt``)."""
        stem = f"{_safe_stem(original_name, '')}-encoded" if original_name else "encoded"
        path = self._target_path(f"{stem}.txt")
        path.write_text(encoded, encoding="utf-8")
        logger.info("Saved encoded text to %s", path)
        self.cleanup()
        return path

    def save_decoded_bytes(self, data: bytes, original_name: Optional[str] = None) -> Path:
        """Persist decoded bytes with an extension derived from their content."""
        mime_type = sniff_mime_type(data)
        name = download_name(_safe_stem(original_name, "decoded-file"), mime_type)
        path = self._target_path(name)
        path.write_bytes(data)
        logger.info("Saved %s (%s) to %s", name, mime_type, path)
        self.cleanup()
        return path

    def cleanup(self, max_items: Optional[int] = None) -> None:
        """Limit the number of stored artifacts, newest kept."""
        limit = self.max_items if max_items is None else max_items
        if not self.output_dir.exists():
            return
        folders = sorted(
            (child for child in self.output_dir.iterdir() if child.is_dir()),
            key=lambda child: child.stat().st_mtime,
            reverse=True,
        )
        for stale in folders[limit:]:
            for file in stale.iterdir():
                file.unlink(missing_ok=True)
            stale.rmdir()
