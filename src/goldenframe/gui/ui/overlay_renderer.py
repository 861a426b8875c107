"""Rendering of the resized panels and the golden decomposition overlay."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from ...config import (
    ANALYSIS_MESSAGE,
    MAX_DISPLAY_SIZE,
    RECT_STROKE_COLOR,
    RECT_STROKE_WIDTH,
    SPIRAL_STROKE_COLOR,
    SPIRAL_STROKE_WIDTH,
    SQUARE_STROKE_COLOR,
    SQUARE_STROKE_WIDTH,
)
from ...core.decomposer import decompose_canvas
from ...core.sizing import (
    CanvasSize,
    aspect_ratio,
    calculate_display_size,
    calculate_golden_size,
    format_ratio,
    orientation_for,
)
from ...domain.models import Arc, DecompositionStep, Orientation
from ...errors import ImageDecodeError


@dataclass(frozen=True)
class OverlayStyle:
    """Stroke colours and widths for the three overlay layers."""

    rect_color: str = RECT_STROKE_COLOR
    rect_width: float = RECT_STROKE_WIDTH
    square_color: str = SQUARE_STROKE_COLOR
    square_width: float = SQUARE_STROKE_WIDTH
    spiral_color: str = SPIRAL_STROKE_COLOR
    spiral_width: float = SPIRAL_STROKE_WIDTH

    def pen(self, color: str, width: float) -> QPen:
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        return pen


@dataclass(frozen=True)
class RenderedPanels:
    """Everything the window needs to present one processed image."""

    display_image: QImage
    golden_image: QImage
    display_size: CanvasSize
    golden_size: CanvasSize
    orientation: Orientation
    ratio: float
    steps: tuple[DecompositionStep, ...]

    @property
    def ratio_text(self) -> str:
        return format_ratio(self.ratio)

    @property
    def analysis_text(self) -> str:
        return ANALYSIS_MESSAGE


def _qt_arc_rect(arc: Arc) -> QRectF:
    return QRectF(arc.cx - arc.radius, arc.cy - arc.radius, 2 * arc.radius, 2 * arc.radius)


def _qt_degrees(angle: float) -> float:
    # Qt measures counter-clockwise on screen; the geometry is clockwise.
    return -math.degrees(angle)


def build_spiral_path(steps: Sequence[DecompositionStep]) -> QPainterPath:
    """Return one path chaining the quarter circles of *steps*."""

    path = QPainterPath()
    for position, step in enumerate(steps):
        arc = step.arc
        bounds = _qt_arc_rect(arc)
        if position == 0:
            path.arcMoveTo(bounds, _qt_degrees(arc.start_angle))
        path.arcTo(bounds, _qt_degrees(arc.start_angle), -math.degrees(arc.sweep))
    return path


def paint_decomposition(
    painter: QPainter,
    steps: Sequence[DecompositionStep],
    style: OverlayStyle | None = None,
) -> None:
    """Stroke sub-rectangles, then squares, then the spiral on top."""

    style = style or OverlayStyle()
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    painter.setBrush(Qt.BrushStyle.NoBrush)

    painter.setPen(style.pen(style.rect_color, style.rect_width))
    for step in steps:
        rect = step.rect
        painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))

    painter.setPen(style.pen(style.square_color, style.square_width))
    for step in steps:
        square = step.square
        painter.drawRect(QRectF(square.x, square.y, square.size, square.size))

    painter.setPen(style.pen(style.spiral_color, style.spiral_width))
    painter.drawPath(build_spiral_path(steps))
    painter.restore()


def _blank_canvas(size: CanvasSize) -> QImage:
    width, height = size.pixel_size()
    canvas = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
    canvas.fill(Qt.GlobalColor.transparent)
    return canvas


def render_scaled(image: QImage, size: CanvasSize) -> QImage:
    """Return *image* stretched to exactly fill *size* (no letterboxing)."""

    canvas = _blank_canvas(size)
    painter = QPainter(canvas)
    try:
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)
        painter.drawImage(QRectF(0.0, 0.0, size.width, size.height), image)
    finally:
        painter.end()
    return canvas


def render_golden_overlay(
    image: QImage,
    size: CanvasSize,
    orientation: Orientation,
    style: OverlayStyle | None = None,
) -> tuple[QImage, tuple[DecompositionStep, ...]]:
    """Draw *image* into the golden box and stroke its decomposition."""

    steps = decompose_canvas(size.width, size.height, orientation)
    canvas = render_scaled(image, size)
    painter = QPainter(canvas)
    try:
        paint_decomposition(painter, steps, style)
    finally:
        painter.end()
    return canvas, steps


def render_panels(
    image: QImage,
    max_size: int = MAX_DISPLAY_SIZE,
    style: OverlayStyle | None = None,
) -> RenderedPanels:
    """Produce the original-aspect panel and the golden overlay panel.

    Raises:
        ImageDecodeError: if *image* is null or empty.
    """

    if image.isNull() or image.width() <= 0 or image.height() <= 0:
        raise ImageDecodeError("decoded image is empty")

    width, height = image.width(), image.height()
    display_size = calculate_display_size(width, height, max_size)
    golden_size = calculate_golden_size(width, height, max_size)
    # Orientation comes from the source, never from the forced golden box.
    orientation = orientation_for(width, height)

    golden_image, steps = render_golden_overlay(image, golden_size, orientation, style)
    return RenderedPanels(
        display_image=render_scaled(image, display_size),
        golden_image=golden_image,
        display_size=display_size,
        golden_size=golden_size,
        orientation=orientation,
        ratio=aspect_ratio(width, height),
        steps=steps,
    )


__all__ = [
    "OverlayStyle",
    "RenderedPanels",
    "build_spiral_path",
    "paint_decomposition",
    "render_golden_overlay",
    "render_panels",
    "render_scaled",
]
