"""Utility helpers for image previews."""

from __future__ import annotations

import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError


def load_image(data: bytes) -> Image.Image:
    """Open image bytes with Pillow.

    Raises:
        ValueError: if the bytes are not an image Pillow understands.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ValueError(f"Not a supported image: {exc}") from exc
    return image


def describe_image(image: Image.Image) -> str:
    """Short label such as ``PNG 640×480``."""
    width, height = image.size
    fmt = image.format or "image"
    return f"{fmt} {width}×{height}"


def generate_thumbnail(image: Image.Image, max_size: Tuple[int, int] = (256, 256)) -> Image.Image:
    """Create a thumbnail suitable for history previews."""
    thumb = image.copy()
    thumb.thumbnail(max_size)
    return thumb
