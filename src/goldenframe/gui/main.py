"""GUI entry point for the goldenframe desktop application."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from goldenframe.config import MAX_DISPLAY_SIZE
from goldenframe.gui.ui.main_window import MainWindow


def main(argv: list[str] | None = None, *, max_size: int = MAX_DISPLAY_SIZE) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    app = QApplication.instance() or QApplication(arguments)

    window = MainWindow(max_size=max_size)
    window.show()
    # Allow opening an image directly via argv[1].
    if len(arguments) > 1:
        window.open_image(Path(arguments[1]))
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
