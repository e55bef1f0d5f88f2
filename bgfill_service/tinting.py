"""Fixed accent tint for non-transparent pixels."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image

TINT_COLOR: Tuple[int, int, int] = (102, 212, 255)  # #66D4FF
TINT_FACTOR = 0.2


def tint_image(
    image: Image.Image,
    color: Tuple[int, int, int] = TINT_COLOR,
    factor: float = TINT_FACTOR,
) -> Image.Image:
    """
    Blend `color` into every pixel with alpha > 0.

    Each RGB channel becomes ``round(old * (1 - factor) + color * factor)``
    with halves rounded up. Alpha is left untouched and fully transparent
    pixels keep their original bytes.
    """
    rgba = np.array(image.convert("RGBA"), dtype=np.uint8)
    visible = rgba[..., 3] > 0
    if not np.any(visible):
        return Image.fromarray(rgba)

    rgb = rgba[..., :3].astype(np.float64)
    target = np.asarray(color, dtype=np.float64)
    blended = np.floor(rgb * (1.0 - factor) + target * factor + 0.5)
    blended = np.clip(blended, 0, 255).astype(np.uint8)

    rgba[visible, :3] = blended[visible]
    return Image.fromarray(rgba)
