"""Upload target accepting clicks and local file drops."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QDragEnterEvent, QDragLeaveEvent, QDragMoveEvent, QDropEvent, QMouseEvent
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from ....config import DROP_HINT


class DropArea(QFrame):
    """Framed hint that forwards clicks and dropped files."""

    clicked = Signal()
    filesDropped = Signal(list)
    """Emitted with the local :class:`Path` objects carried by a drop."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("uploadArea")
        self.setAcceptDrops(True)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setMinimumHeight(120)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setProperty("dragover", False)

        self._label = QLabel(DROP_HINT, self)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout = QVBoxLayout(self)
        layout.addWidget(self._label)

    @property
    def is_drag_over(self) -> bool:
        return bool(self.property("dragover"))

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------
    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:  # type: ignore[override]
        if self._extract_local_files(event):
            self._set_drag_over(True)
            event.acceptProposedAction()
            return
        event.ignore()

    def dragMoveEvent(self, event: QDragMoveEvent) -> None:  # type: ignore[override]
        if self._extract_local_files(event):
            event.acceptProposedAction()
            return
        event.ignore()

    def dragLeaveEvent(self, event: QDragLeaveEvent) -> None:  # type: ignore[override]
        self._set_drag_over(False)
        super().dragLeaveEvent(event)

    def dropEvent(self, event: QDropEvent) -> None:  # type: ignore[override]
        self._set_drag_over(False)
        paths = self._extract_local_files(event)
        if not paths:
            event.ignore()
            return
        event.acceptProposedAction()
        self.filesDropped.emit(paths)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _set_drag_over(self, active: bool) -> None:
        self.setProperty("dragover", active)
        # Re-polish so ``#uploadArea[dragover="true"]`` style rules apply.
        self.style().unpolish(self)
        self.style().polish(self)

    @staticmethod
    def _extract_local_files(event) -> list[Path]:
        mime = event.mimeData()
        if mime is None or not mime.hasUrls():
            return []
        paths: list[Path] = []
        for url in mime.urls():
            if not url.isLocalFile():
                continue
            paths.append(Path(url.toLocalFile()).expanduser())
        return paths


__all__ = ["DropArea"]
