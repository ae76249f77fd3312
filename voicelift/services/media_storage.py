"""Media files on disk under <documents root>/WorkoutMedia.

Rows in workout_media only hold the filename; this module reads and writes the files.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from voicelift.core.config import Settings, get_settings
from voicelift.core.enums import MediaType

logger = logging.getLogger(__name__)

EXTENSIONS = {MediaType.PHOTO: ".jpg", MediaType.VIDEO: ".mp4"}


class MediaStorageUnavailable(RuntimeError):
    """Raised when the documents root cannot be resolved."""


def media_directory(settings: Settings | None = None, create: bool = True) -> Path:
    """The media directory, created on first use."""
    media_dir = (settings or get_settings()).media_dir
    if media_dir is None:
        raise MediaStorageUnavailable("documents directory could not be resolved")
    if create:
        media_dir.mkdir(parents=True, exist_ok=True)
    return media_dir


def media_path(filename: str, settings: Settings | None = None) -> Path:
    return media_directory(settings, create=False) / filename


def save_media(data: bytes, media_type: MediaType, settings: Settings | None = None) -> str:
    """Write data to a new uniquely named file and return its filename."""
    filename = f"{uuid.uuid4()}{EXTENSIONS[media_type]}"
    path = media_directory(settings) / filename
    path.write_bytes(data)
    logger.info("Saved %s %s (%d bytes)", media_type.value, filename, len(data))
    return filename


def load_media(filename: str, settings: Settings | None = None) -> bytes | None:
    """File contents, or None if the file is gone."""
    path = media_path(filename, settings)
    if not path.is_file():
        return None
    return path.read_bytes()


def delete_media(filename: str, settings: Settings | None = None) -> bool:
    """Remove the file; False if there was no file to remove."""
    path = media_path(filename, settings)
    if path.is_dir():
        logger.warning("Media reference %s is a directory; not deleting", filename)
        return False
    try:
        path.unlink()
    except FileNotFoundError:
        logger.warning("Media file %s already missing", filename)
        return False
    logger.info("Deleted media file %s", filename)
    return True
