"""Thin client for the remove.bg background-removal API."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from . import config

logger = logging.getLogger(__name__)


class RemoveBgError(RuntimeError):
    """Raised when the remote service cannot produce a cutout."""


def remove_background(
    image_bytes: bytes,
    filename: Optional[str] = None,
    settings: Optional[config.Settings] = None,
) -> bytes:
    """
    Send raw image bytes to remove.bg and return the PNG cutout.

    The remote error body is embedded in the raised message so callers can
    surface it to clients unchanged.
    """
    settings = settings or config.get_settings()
    if not settings.removebg_api_key:
        raise RemoveBgError("REMOVEBG_API_KEY is not configured")

    resp = requests.post(
        settings.removebg_api_url,
        headers={"X-Api-Key": settings.removebg_api_key},
        files={"image_file": (filename or "image.png", image_bytes)},
        data={"size": settings.removebg_size},
        timeout=(5, settings.request_timeout_seconds),
    )
    if not resp.ok:
        logger.warning("remove.bg returned status=%s", resp.status_code)
        raise RemoveBgError(f"Remove.bg API failed: {resp.text}")

    logger.debug("remove.bg returned %d bytes", len(resp.content))
    return resp.content
