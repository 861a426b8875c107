from unittest.mock import MagicMock

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for rendering tests", exc_type=ImportError)

from PySide6.QtCore import QRectF
from PySide6.QtGui import QColor, QImage

from goldenframe.config import GOLDEN_RATIO
from goldenframe.core.decomposer import decompose_canvas
from goldenframe.core.sizing import CanvasSize
from goldenframe.domain.models import Orientation
from goldenframe.errors import ImageDecodeError
from goldenframe.gui.ui.overlay_renderer import (
    OverlayStyle,
    build_spiral_path,
    paint_decomposition,
    render_panels,
    render_scaled,
)


def _solid_image(width: int, height: int, color: str = "#336699") -> QImage:
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(color))
    return image


def test_render_scaled_fills_the_whole_box(qapp):
    scaled = render_scaled(_solid_image(40, 20), CanvasSize(300.0, 185.41))

    assert (scaled.width(), scaled.height()) == (300, 185)
    # No letterboxing: corners carry image pixels, not the transparent fill.
    assert scaled.pixelColor(0, 0).name() == "#336699"
    assert scaled.pixelColor(299, 184).name() == "#336699"
    assert scaled.pixelColor(299, 184).alpha() == 255


def test_render_panels_landscape(qapp):
    panels = render_panels(_solid_image(400, 200), max_size=300)

    assert (panels.display_image.width(), panels.display_image.height()) == (300, 150)
    assert (panels.golden_image.width(), panels.golden_image.height()) == (300, 185)
    assert panels.orientation is Orientation.LANDSCAPE
    assert panels.ratio == 2.0
    assert panels.ratio_text == "Ratio: 1:2.000"
    assert "golden ratio" in panels.analysis_text
    assert len(panels.steps) == 10
    assert panels.steps[0].rect.width == 300.0


def test_render_panels_portrait_keeps_source_orientation(qapp):
    panels = render_panels(_solid_image(200, 400), max_size=300)

    assert (panels.golden_image.width(), panels.golden_image.height()) == (185, 300)
    assert panels.orientation is Orientation.PORTRAIT
    first = panels.steps[0]
    assert first.square.y == pytest.approx(300.0 - 300.0 / GOLDEN_RATIO)


def test_render_panels_rejects_null_image(qapp):
    with pytest.raises(ImageDecodeError):
        render_panels(QImage())


def test_spiral_path_runs_from_first_to_last_arc(qapp):
    steps = decompose_canvas(300.0, 300.0 / GOLDEN_RATIO, Orientation.LANDSCAPE)

    path = build_spiral_path(steps)

    start = path.elementAt(0)
    end = path.currentPosition()
    assert (start.x, start.y) == pytest.approx(steps[0].arc.start_point, abs=1e-3)
    assert (end.x(), end.y()) == pytest.approx(steps[-1].arc.end_point, abs=1e-3)


def test_spiral_path_is_empty_without_steps(qapp):
    assert build_spiral_path(()).isEmpty()


def test_paint_order_rectangles_squares_then_spiral(qapp):
    steps = decompose_canvas(300.0, 300.0 / GOLDEN_RATIO, Orientation.LANDSCAPE)
    painter = MagicMock()
    style = OverlayStyle(spiral_color="#ff0000")

    paint_decomposition(painter, steps, style)

    names = [
        call[0]
        for call in painter.method_calls
        if call[0] in {"setPen", "drawRect", "drawPath"}
    ]
    count = len(steps)
    assert names == (
        ["setPen"] + ["drawRect"] * count
        + ["setPen"] + ["drawRect"] * count
        + ["setPen", "drawPath"]
    )

    rect_calls = [call for call in painter.method_calls if call[0] == "drawRect"]
    assert rect_calls[0].args[0] == QRectF(0.0, 0.0, 300.0, 300.0 / GOLDEN_RATIO)
    square = steps[0].square
    assert rect_calls[count].args[0] == QRectF(square.x, square.y, square.size, square.size)

    pens = [call.args[0] for call in painter.method_calls if call[0] == "setPen"]
    assert pens[0].color().name() == "#cccccc"
    assert pens[1].color().name() == "#888888"
    assert pens[2].color().name() == "#ff0000"
    assert pens[2].widthF() == 2.0


def test_overlay_strokes_change_golden_pixels(qapp):
    plain = render_scaled(_solid_image(400, 200), CanvasSize(300.0, 300.0 / GOLDEN_RATIO))
    panels = render_panels(_solid_image(400, 200), max_size=300)

    assert panels.golden_image.size() == plain.size()
    assert panels.golden_image != plain
