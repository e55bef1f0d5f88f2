"""
High-level processing pipeline.

`update_background_bytes` and `tint_image_bytes` are the entry points used by
both the HTTP API and the local CLI. Orchestration stays linear:
bytes in -> remove.bg -> background lookup -> composite -> PNG bytes out.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config
from .assets import read_background
from .compositing import composite_on_background
from .imaging import encode_png, load_rgba
from .removebg_client import remove_background
from .tinting import tint_image

logger = logging.getLogger(__name__)


def update_background_bytes(
    image_bytes: bytes,
    filename: Optional[str] = None,
    project_type: Optional[str] = None,
    background_choice: Optional[str] = None,
) -> bytes:
    """
    Full pipeline from an uploaded photo to a composited PNG.

    Raises:
        RemoveBgError: when the remote service rejects the image.
        BackgroundAssetError: when the background cannot be read.
        ValueError: when either image cannot be decoded.
    """
    settings = config.get_settings()
    project_type = project_type or settings.default_project_type
    background_choice = background_choice or settings.default_background

    cutout_bytes = remove_background(image_bytes, filename=filename, settings=settings)
    cutout = load_rgba(cutout_bytes)

    background = load_rgba(read_background(project_type, background_choice, settings=settings))
    logger.info(
        "Compositing cutout %sx%s over %s/%s",
        cutout.width,
        cutout.height,
        project_type,
        background_choice,
    )
    return encode_png(composite_on_background(cutout, background))


def tint_image_bytes(image_bytes: bytes) -> bytes:
    """Decode, tint, and re-encode an image as PNG."""
    image = load_rgba(image_bytes)
    logger.info("Tinting image %sx%s", image.width, image.height)
    return encode_png(tint_image(image))
