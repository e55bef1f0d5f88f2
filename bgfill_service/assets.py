"""
Background asset lookup.

Backgrounds live on disk as ``<assets_dir>/<project_type>/<filename>``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from . import config

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp"}


class BackgroundAssetError(OSError):
    """Raised when a background image cannot be resolved or read."""


def background_path(project_type: str, filename: str, settings: Optional[config.Settings] = None) -> Path:
    settings = settings or config.get_settings()
    root = settings.assets_dir.resolve()
    # Lexical check only: symlinked backgrounds may point outside the root.
    path = Path(os.path.normpath(root / project_type / filename))
    if project_type not in settings.project_types:
        raise BackgroundAssetError(
            f"Failed to read background image at {path}: unknown project type {project_type!r}"
        )
    if root not in path.parents:
        raise BackgroundAssetError(
            f"Failed to read background image at {path}: path is outside the asset directory"
        )
    return path


def read_background(project_type: str, filename: str, settings: Optional[config.Settings] = None) -> bytes:
    """Read the raw bytes of a background image."""
    path = background_path(project_type, filename, settings=settings)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise BackgroundAssetError(f"Failed to read background image at {path}: {exc}") from exc
    logger.debug("Loaded background %s (%d bytes)", path, len(data))
    return data


def list_backgrounds(project_type: str, settings: Optional[config.Settings] = None) -> List[str]:
    """Return sorted image filenames available for a project type."""
    settings = settings or config.get_settings()
    if project_type not in settings.project_types:
        return []
    folder = settings.assets_dir / project_type
    if not folder.is_dir():
        logger.info("No background directory for project type %s at %s", project_type, folder)
        return []
    return sorted(
        p.name for p in folder.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    )
