"""Download storage tests."""

from __future__ import annotations

import os

from modules.services.storage_service import StorageService


def test_save_encoded_text_uses_original_name(tmp_path):
    service = StorageService(tmp_path)
    path = service.save_encoded_text("YWJjZA==", "notes.txt")

    assert path.name == "notes.txt-encoded.txt"
    assert path.read_text(encoding="utf-8") == "YWJjZA=="


def test_save_encoded_text_default_name(tmp_path):
    path = StorageService(tmp_path).save_encoded_text("YWJjZA==")
    assert path.name == "encoded.txt"


def test_save_decoded_bytes_adds_sniffed_extension(tmp_path):
    service = StorageService(tmp_path)
    png = service.save_decoded_bytes(b"\x89PNG\r\n\x1a\n", "picture")
    blob = service.save_decoded_bytes(b"\x00\x01")

    assert png.name == "picture.png"
    assert png.read_bytes() == b"\x89PNG\r\n\x1a\n"
    assert blob.name == "decoded-file.bin"


def test_unsafe_names_are_sanitized(tmp_path):
    path = StorageService(tmp_path).save_decoded_bytes(b"hello", "../../etc/pass:wd")
    assert path.parent.parent == tmp_path
    assert path.name == "pass_wd.txt"


def test_cleanup_keeps_newest(tmp_path):
    service = StorageService(tmp_path, max_items=100)
    paths = [service.save_encoded_text(str(index)) for index in range(4)]
    for offset, path in enumerate(paths):
        os.utime(path.parent, (1_000_000 + offset, 1_000_000 + offset))

    service.cleanup(max_items=2)

    remaining = sorted(child.name for child in tmp_path.iterdir())
    assert remaining == sorted(path.parent.name for path in paths[2:])
