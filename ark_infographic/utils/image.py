"""Pillow helpers for sprite bytes and embedding."""

import base64
import io

import numpy as np
import numpy.typing as npt
from PIL import Image

UInt8Array = npt.NDArray[np.uint8]


def decode_png(data: bytes) -> Image.Image:
    """Decode PNG bytes to an RGB or RGBA image."""
    with Image.open(io.BytesIO(data)) as img:
        img.load()
        if img.mode in ("RGB", "RGBA"):
            return img.copy()
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        return img.convert("RGBA" if has_alpha else "RGB")


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def image_to_array(image: Image.Image) -> UInt8Array:
    """(H, W, C) uint8 pixel array of an RGB or RGBA image."""
    return np.array(image, dtype=np.uint8)


def png_data_uri(data: bytes) -> str:
    """``data:`` URI for PNG bytes, suitable for an SVG ``<image>`` href."""
    return "data:image/png;base64," + base64.b64encode(data).decode("ascii")


def image_to_data_uri(image: Image.Image) -> str:
    return png_data_uri(encode_png(image))
