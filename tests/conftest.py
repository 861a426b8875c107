import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt widgets must not try to reach a display server on CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip(
        "PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError
    )
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def png_factory(tmp_path: Path):
    """Write solid-colour PNG files with Pillow and return their paths."""

    Image = pytest.importorskip("PIL.Image")

    def _make(width: int, height: int, name: str = "sample.png", color: str = "#336699") -> Path:
        path = tmp_path / name
        Image.new("RGB", (width, height), color).save(path)
        return path

    return _make
