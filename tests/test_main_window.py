from pathlib import Path
from unittest.mock import MagicMock

import pytest

pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtGui import QColor, QImage

from goldenframe.gui.ui.main_window import MainWindow


def _solid_image(width: int, height: int) -> QImage:
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor("#aa5500"))
    return image


@pytest.fixture
def pool() -> MagicMock:
    return MagicMock()


@pytest.fixture
def window(qapp, pool):
    window = MainWindow(max_size=100, thread_pool=pool)
    yield window
    window.close()
    window.deleteLater()


def test_results_hidden_until_first_render(window):
    assert window.result_section.isHidden()


def test_render_fills_both_panels(window):
    window.controller.render_image(Path("wide.png"), _solid_image(400, 100))

    assert not window.result_section.isHidden()
    assert window.original_panel.pixmap().size().toTuple() == (100, 25)
    assert window.golden_panel.pixmap().size().toTuple() == (100, 61)
    assert window.ratio_label.text() == "Ratio: 1:4.000"
    assert window.analysis_label.text()


def test_regenerate_hides_results(window):
    window.controller.render_image(Path("wide.png"), _solid_image(400, 100))

    window.regenerate_button.click()

    assert window.result_section.isHidden()
    assert window.ratio_label.text() == ""


def test_dropped_files_go_through_the_media_check(window, pool):
    window.drop_area.filesDropped.emit([Path("readme.txt")])
    pool.start.assert_not_called()
    assert window.statusBar().currentMessage() == "Only image files can be dropped: readme.txt"

    window.drop_area.filesDropped.emit([Path("picture.png")])
    pool.start.assert_called_once()


def test_open_image_requests_a_render(window, pool):
    generation = window.open_image(Path("chosen.bmp"))

    assert generation == window.controller.generation
    assert pool.start.call_args.args[0].source == Path("chosen.bmp")


def test_decode_failure_shows_status_message(qapp, pool):
    window = MainWindow(max_size=100, thread_pool=pool)
    window.open_image(Path("broken.png"))
    worker = pool.start.call_args.args[0]

    worker.signals.loadFailed.emit(worker.generation, worker.source, "bad data")

    assert window.statusBar().currentMessage().startswith("Could not load image")
    assert window.result_section.isHidden()
    window.close()
