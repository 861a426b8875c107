"""Helpers for loading Qt image primitives with Pillow fallbacks."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Optional
import logging

from PIL import Image, UnidentifiedImageError
from PIL.ImageQt import ImageQt
from PySide6.QtGui import QImage, QImageReader

from ..errors import ImageDecodeError

_LOGGER = logging.getLogger(__name__)


def load_qimage(source: Path) -> Optional[QImage]:
    """Return a :class:`QImage` for *source*, or ``None`` when decoding fails."""

    reader = QImageReader(str(source))
    # Qt keeps a process-wide image cache; every render decodes a fresh file so
    # there is nothing to gain from it.  Older PySide6 builds lack the setter.
    disable_cache = getattr(reader, "setCacheEnabled", None)
    if callable(disable_cache):
        disable_cache(False)
    # Pixels are drawn as stored; EXIF orientation is deliberately ignored.
    reader.setAutoTransform(False)
    image = reader.read()
    if not image.isNull():
        return image
    _LOGGER.debug("QImageReader could not decode %s: %s", source, reader.errorString())
    return _load_with_pillow(source)


def qimage_from_bytes(data: bytes) -> Optional[QImage]:
    """Return a :class:`QImage` decoded from an in-memory payload."""

    image = QImage()
    if image.loadFromData(data):
        return image
    try:
        with Image.open(BytesIO(data)) as img:
            qt_image = ImageQt(img.convert("RGBA"))
    except Exception:
        _LOGGER.exception("Pillow failed to decode image bytes in qimage_from_bytes")
        return None
    return QImage(qt_image)


def read_image_size(source: Path) -> tuple[int, int]:
    """Return ``(width, height)`` of *source* without decoding the pixels.

    Raises:
        ImageDecodeError: if the file is missing or not a recognised image.
    """

    try:
        with Image.open(source) as img:
            width, height = img.size
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise ImageDecodeError(f"{source} does not exist") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"{source} is not a readable image") from exc
    return width, height


def _load_with_pillow(source: Path) -> Optional[QImage]:
    try:
        with Image.open(source) as img:
            qt_image = ImageQt(img.convert("RGBA"))
    except Exception:
        _LOGGER.warning("Pillow failed to load image from %s", source, exc_info=True)
        return None
    return QImage(qt_image)


__all__ = ["load_qimage", "qimage_from_bytes", "read_image_size"]
