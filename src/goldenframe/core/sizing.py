"""Canvas size helpers for the two rendered panels."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import GOLDEN_RATIO, RATIO_LABEL_TEMPLATE
from ..domain.models import Orientation
from ..errors import InvalidDimensionsError


@dataclass(frozen=True)
class CanvasSize:
    """Floating-point panel size; pixel buffers use :meth:`pixel_size`."""

    width: float
    height: float

    def pixel_size(self) -> tuple[int, int]:
        # Truncate like an HTML canvas does, but never produce an empty buffer.
        return max(1, int(self.width)), max(1, int(self.height))


def _validate(width: float, height: float) -> None:
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidDimensionsError(f"image dimensions must be positive, got {width}x{height}")


def aspect_ratio(width: float, height: float) -> float:
    _validate(width, height)
    return width / height


def orientation_for(width: float, height: float) -> Orientation:
    _validate(width, height)
    return Orientation.from_size(width, height)


def calculate_display_size(width: float, height: float, max_size: float) -> CanvasSize:
    """Return the aspect-preserving size whose longer side equals *max_size*."""

    ratio = aspect_ratio(width, height)
    if width > height:
        return CanvasSize(float(max_size), max_size / ratio)
    return CanvasSize(max_size * ratio, float(max_size))


def calculate_golden_size(width: float, height: float, max_size: float) -> CanvasSize:
    """Return the golden-ratio canvas for an image of *width* x *height*.

    Landscape and square sources get ``max_size`` across and ``max_size / φ``
    down; portrait sources get the transposed box so they are not flattened.
    """

    if orientation_for(width, height) is Orientation.PORTRAIT:
        return CanvasSize(max_size / GOLDEN_RATIO, float(max_size))
    return CanvasSize(float(max_size), max_size / GOLDEN_RATIO)


def format_ratio(ratio: float) -> str:
    return RATIO_LABEL_TEMPLATE.format(ratio=ratio)


__all__ = [
    "CanvasSize",
    "aspect_ratio",
    "calculate_display_size",
    "calculate_golden_size",
    "format_ratio",
    "orientation_for",
]
