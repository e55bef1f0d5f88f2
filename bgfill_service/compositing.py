"""Place a background-removed cutout over a background image."""

from __future__ import annotations

import logging

from PIL import Image

logger = logging.getLogger(__name__)


def composite_on_background(cutout: Image.Image, background: Image.Image) -> Image.Image:
    """
    Stretch `background` to the cutout's size and paint the cutout on top.

    Aspect ratio of the background is not preserved. The result has the
    cutout's dimensions and is opaque wherever the background was opaque.
    """
    cutout = cutout.convert("RGBA")
    background = background.convert("RGBA")
    if background.size != cutout.size:
        logger.debug("Resizing background %s -> %s", background.size, cutout.size)
        background = background.resize(cutout.size, Image.BILINEAR)
    background.alpha_composite(cutout, (0, 0))
    return background
