"""Media type checks applied to files before they are decoded."""

from __future__ import annotations

import mimetypes
from pathlib import Path

# Suffixes offered by the file picker's image filter.  The picker also allows
# "All files"; anything undecodable is reported after the load fails.
IMAGE_EXTENSIONS: frozenset[str] = frozenset({
    ".bmp",
    ".gif",
    ".jpeg",
    ".jpg",
    ".png",
    ".tif",
    ".tiff",
    ".webp",
})


def _normalise_mime(value: object) -> str:
    """Return a lower-case MIME type string or an empty string."""

    if isinstance(value, str):
        return value.strip().lower()
    return ""


def declared_media_type(path: Path) -> str:
    """Return the media type a file declares through its name."""

    mime, _ = mimetypes.guess_type(path.name)
    return _normalise_mime(mime)


def is_image_media_type(mime: object) -> bool:
    return _normalise_mime(mime).startswith("image/")


def is_image_path(path: Path) -> bool:
    """Return ``True`` when *path* declares an ``image/*`` media type.

    Unknown types fall back to :data:`IMAGE_EXTENSIONS` because platform MIME
    registries are patchy for formats such as WebP.
    """

    if is_image_media_type(declared_media_type(path)):
        return True
    return path.suffix.lower() in IMAGE_EXTENSIONS and not declared_media_type(path)


def file_dialog_filter() -> str:
    patterns = " ".join(f"*{suffix}" for suffix in sorted(IMAGE_EXTENSIONS))
    return f"Images ({patterns});;All files (*)"


__all__ = [
    "IMAGE_EXTENSIONS",
    "declared_media_type",
    "file_dialog_filter",
    "is_image_media_type",
    "is_image_path",
]
