"""Code snippets showing the equivalent conversion in other languages."""

from __future__ import annotations

from modules.codec.base64_codec import encode_text

SNIPPET_LANGUAGES = ("javascript", "python", "php")
MAX_SNIPPET_INPUT_LENGTH = 500
UNSUPPORTED_LANGUAGE = "Language not supported"


def _escape(value: str) -> str:
    return value.replace('"', '\\"').replace("'", "\\'")


def truncate_snippet_input(value: str, limit: int = MAX_SNIPPET_INPUT_LENGTH) -> str:
    if len(value) > limit:
        return value[:limit] + "..."
    return value


def _javascript(kind: str, value: str, expected: str) -> str:
    if kind == "encode":
        return (
            "// JavaScript Base64 Encode (UTF-8 safe)\n"
            "const encoder = new TextEncoder();\n"
            f'const bytes = encoder.encode("{value}");\n'
            "let binary = '';\n"
            "for (let i = 0; i < bytes.byteLength; i++) {\n"
            "  binary += String.fromCharCode(bytes[i]);\n"
            "}\n"
            "const base64 = btoa(binary);\n"
            f"console.log(base64); // Output: {expected}"
        )
    return (
        "// JavaScript Base64 Decode (UTF-8 safe)\n"
        f'const binary = atob("{value}");\n'
        "const bytes = new Uint8Array(binary.length);\n"
        "for (let i = 0; i < binary.length; i++) {\n"
        "  bytes[i] = binary.charCodeAt(i);\n"
        "}\n"
        "const text = new TextDecoder().decode(bytes);\n"
        "console.log(text);"
    )


def _python(kind: str, value: str, expected: str) -> str:
    if kind == "encode":
        return (
            "# Python Base64 Encode (UTF-8 safe)\n"
            "import base64\n"
            f'text = "{value}"\n'
            "encoded = base64.b64encode(text.encode('utf-8'))\n"
            f"print(encoded.decode('ascii'))  # Output: {expected}"
        )
    return (
        "# Python Base64 Decode (UTF-8 safe)\n"
        "import base64\n"
        f'encoded = "{value}"\n'
        "decoded = base64.b64decode(encoded)\n"
        "print(decoded.decode('utf-8'))"
    )


def _php(kind: str, value: str, expected: str) -> str:
    if kind == "encode":
        return (
            "<?php\n"
            "// PHP Base64 Encode (UTF-8 safe)\n"
            f'$text = "{value}";\n'
            "$encoded = base64_encode($text);\n"
            f"echo $encoded; // Output: {expected}\n"
            "?>"
        )
    return (
        "<?php\n"
        "// PHP Base64 Decode (UTF-8 safe)\n"
        f'$encoded = "{value}";\n'
        "$decoded = base64_decode($encoded);\n"
        "echo $decoded;\n"
        "?>"
    )


_RENDERERS = {
    "javascript": _javascript,
    "python": _python,
    "php": _php,
}


def get_code_snippet(kind: str, language: str, value: str) -> str:
    """Return display-only source performing the same encode or decode."""
    renderer = _RENDERERS.get((language or "").lower())
    if renderer is None:
        return UNSUPPORTED_LANGUAGE
    truncated = truncate_snippet_input(value)
    expected = encode_text(truncated) if kind == "encode" else ""
    return renderer(kind, _escape(truncated), expected)
