"""Qt widgets composing the main application window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThreadPool, Qt
from PySide6.QtGui import QCloseEvent, QPixmap
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config import MAX_DISPLAY_SIZE, STATUS_MESSAGE_TIMEOUT_MS
from ...errors.handler import ErrorHandler, ErrorSeverity
from ...media_classifier import file_dialog_filter
from .controllers.render_controller import RenderController
from .overlay_renderer import RenderedPanels
from .widgets.drop_area import DropArea

_LOGGER = logging.getLogger(__name__)

_STYLESHEET = """
#uploadArea { border: 2px dashed #999999; border-radius: 8px; }
#uploadArea[dragover="true"] { border-color: #d4a017; background: #fff8dc; }
#panelCaption { font-weight: bold; }
"""


class MainWindow(QMainWindow):
    """Upload controls on top, original and golden panels below."""

    def __init__(
        self,
        *,
        max_size: int = MAX_DISPLAY_SIZE,
        controller: RenderController | None = None,
        thread_pool: QThreadPool | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Golden Frame")
        self.setStyleSheet(_STYLESHEET)

        self.error_handler = ErrorHandler(_LOGGER)
        self.error_handler.register_ui_callback(self._show_error)
        self.controller = controller or RenderController(
            max_size=max_size,
            thread_pool=thread_pool,
            error_handler=self.error_handler,
            parent=self,
        )

        self._build_ui(max_size)
        self._connect_signals()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _build_ui(self, max_size: int) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self.upload_button = QPushButton("Choose image…", central)
        self.drop_area = DropArea(central)
        layout.addWidget(self.drop_area)
        layout.addWidget(self.upload_button, alignment=Qt.AlignmentFlag.AlignCenter)

        self.result_section = QWidget(central)
        result_layout = QVBoxLayout(self.result_section)
        panels = QHBoxLayout()
        self.original_panel = self._make_panel("Original", max_size, panels)
        self.golden_panel = self._make_panel("Golden ratio", max_size, panels)
        result_layout.addLayout(panels)

        self.ratio_label = QLabel(self.result_section)
        self.analysis_label = QLabel(self.result_section)
        self.analysis_label.setWordWrap(True)
        self.regenerate_button = QPushButton("Try another image", self.result_section)
        result_layout.addWidget(self.ratio_label)
        result_layout.addWidget(self.analysis_label)
        result_layout.addWidget(self.regenerate_button, alignment=Qt.AlignmentFlag.AlignCenter)
        self.result_section.setVisible(False)
        layout.addWidget(self.result_section)

        self.setCentralWidget(central)

    def _make_panel(self, caption: str, max_size: int, row: QHBoxLayout) -> QLabel:
        column = QVBoxLayout()
        title = QLabel(caption, self.result_section)
        title.setObjectName("panelCaption")
        image_label = QLabel(self.result_section)
        image_label.setMinimumSize(max_size, max_size)
        image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        column.addWidget(title, alignment=Qt.AlignmentFlag.AlignCenter)
        column.addWidget(image_label)
        row.addLayout(column)
        return image_label

    def _connect_signals(self) -> None:
        self.upload_button.clicked.connect(self.choose_file)
        self.drop_area.clicked.connect(self.choose_file)
        self.drop_area.filesDropped.connect(self.controller.request_drop)
        self.regenerate_button.clicked.connect(self.controller.reset)
        self.controller.renderReady.connect(self.show_result)
        self.controller.cleared.connect(self.clear_result)
        self.controller.busyChanged.connect(self._on_busy_changed)
        self.controller.dropRejected.connect(self._on_drop_rejected)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def choose_file(self) -> None:
        """Ask for a file; any file is accepted and decode failures are reported."""

        filename, _ = QFileDialog.getOpenFileName(
            self, "Choose an image", str(Path.home()), file_dialog_filter()
        )
        if filename:
            self.open_image(Path(filename))

    def open_image(self, source: Path) -> int:
        return self.controller.request_render(source)

    def show_result(self, source: Path, panels: RenderedPanels) -> None:
        self.original_panel.setPixmap(QPixmap.fromImage(panels.display_image))
        self.golden_panel.setPixmap(QPixmap.fromImage(panels.golden_image))
        self.ratio_label.setText(panels.ratio_text)
        self.analysis_label.setText(panels.analysis_text)
        self.result_section.setVisible(True)
        self.statusBar().showMessage(source.name, STATUS_MESSAGE_TIMEOUT_MS)

    def clear_result(self) -> None:
        self.result_section.setVisible(False)
        self.original_panel.clear()
        self.golden_panel.clear()
        self.ratio_label.clear()
        self.analysis_label.clear()

    def _on_busy_changed(self, busy: bool) -> None:
        if busy:
            self.statusBar().showMessage("Loading image…")
        else:
            self.statusBar().clearMessage()

    def _on_drop_rejected(self, source: Path, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    def _show_error(self, message: str, severity: ErrorSeverity) -> None:
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        # In-flight decodes finish on the pool; their results are ignored.
        self.controller.reset()
        super().closeEvent(event)


__all__ = ["MainWindow"]
