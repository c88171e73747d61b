"""Base64 codec unit tests."""

from __future__ import annotations

import logging

import pytest

from modules.codec.base64_codec import (
    decode_bytes,
    decode_text,
    encode_bytes,
    encode_text,
    format_file_size,
    is_base64,
    strip_data_url,
    to_data_url,
)


@pytest.mark.parametrize(
    "text",
    [
        "hello",
        "",
        "नमस्ते दुनिया",
        "வணக்கம்",
        "emoji 🚀 and accents éàü",
        "line one\nline two\ttabbed",
    ],
)
def test_decode_reverses_encode(text):
    assert decode_text(encode_text(text)) == text


def test_encode_text_uses_utf8_bytes():
    assert encode_text("abcd") == "YWJjZA=="
    assert encode_text("é") == "w6k="


def test_encode_text_failure_returns_empty_and_logs(caplog):
    with caplog.at_level(logging.ERROR):
        assert encode_text("\ud800") == ""
    assert "Encoding error" in caplog.text


def test_decode_text_trims_whitespace():
    assert decode_text("  YWJjZA==\n") == "abcd"


def test_decode_text_malformed_returns_empty_and_logs(caplog):
    with caplog.at_level(logging.ERROR):
        assert decode_text("not base64!") == ""
    assert "Decoding error" in caplog.text


def test_decode_text_replaces_invalid_utf8():
    assert decode_text(encode_bytes(b"\xff\xfeok")) == "\ufffd\ufffdok"


def test_is_base64_structural_check():
    assert is_base64("YWJjZA==") is True
    assert is_base64("abc") is False
    assert is_base64("") is False
    assert is_base64("YWJj ZA==") is False
    assert is_base64("YW-jZA==") is False
    assert is_base64("YWJ\n") is False
    # structurally valid even though it does not decode
    assert is_base64("====") is True


@pytest.mark.parametrize("data", [b"\x00", b"\x00\x01\x02", bytes(range(256)), b"\xff" * 7])
def test_encoded_bytes_pass_structural_check(data):
    assert is_base64(encode_bytes(data))


def test_decode_bytes_ignores_line_breaks():
    assert decode_bytes("YWJj\nZA==") == b"abcd"


def test_decode_bytes_rejects_malformed():
    with pytest.raises(ValueError):
        decode_bytes("YWJjZA=!")


def test_strip_data_url():
    assert strip_data_url("data:image/png;base64,iVBORw0KGgo=") == ("image/png", "iVBORw0KGgo=")
    assert strip_data_url("  YWJjZA==  ") == (None, "YWJjZA==")


def test_to_data_url_round_trip():
    url = to_data_url(b"abcd", "text/plain")
    assert url == "data:text/plain;base64,YWJjZA=="
    assert strip_data_url(url) == ("text/plain", "YWJjZA==")


def test_format_file_size():
    assert format_file_size(512) == "512 B"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(2 * 1024 * 1024) == "2.0 MB"
