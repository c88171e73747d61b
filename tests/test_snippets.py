"""Code snippet generation tests."""

from __future__ import annotations

from modules.codec.snippets import (
    MAX_SNIPPET_INPUT_LENGTH,
    SNIPPET_LANGUAGES,
    UNSUPPORTED_LANGUAGE,
    get_code_snippet,
)


def test_encode_snippets_include_expected_output():
    for language in SNIPPET_LANGUAGES:
        snippet = get_code_snippet("encode", language, "abcd")
        assert "abcd" in snippet
        assert "Output: YWJjZA==" in snippet


def test_decode_snippet_embeds_payload():
    snippet = get_code_snippet("decode", "python", "YWJjZA==")
    assert 'encoded = "YWJjZA=="' in snippet
    assert "b64decode" in snippet


def test_quotes_are_escaped():
    snippet = get_code_snippet("encode", "javascript", 'say "hi"')
    assert 'say \\"hi\\"' in snippet


def test_long_input_is_truncated():
    snippet = get_code_snippet("decode", "php", "A" * (MAX_SNIPPET_INPUT_LENGTH + 50))
    assert "A" * MAX_SNIPPET_INPUT_LENGTH + "..." in snippet
    assert "A" * (MAX_SNIPPET_INPUT_LENGTH + 1) not in snippet


def test_unknown_language():
    assert get_code_snippet("encode", "cobol", "abc") == UNSUPPORTED_LANGUAGE
