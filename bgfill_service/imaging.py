"""Image decode/encode helpers shared by the compositing and tint steps."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

PNG_DATA_URL_PREFIX = "data:image/png;base64,"


def load_rgba(image_bytes: bytes) -> Image.Image:
    """Decode image bytes into an RGBA PIL image."""
    try:
        image = Image.open(BytesIO(image_bytes))
        image.load()
    except Exception as exc:  # noqa: BLE001
        raise ValueError("Invalid image data") from exc
    return image.convert("RGBA")


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(png_bytes: bytes) -> str:
    return PNG_DATA_URL_PREFIX + base64.b64encode(png_bytes).decode("ascii")
