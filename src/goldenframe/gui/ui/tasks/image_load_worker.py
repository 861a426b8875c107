"""Worker that decodes dropped or picked images off the UI thread."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, Signal
from PySide6.QtGui import QImage

from ....utils import image_loader


class ImageLoadWorkerSignals(QObject):
    """Signals exposed by :class:`ImageLoadWorker`.

    The signal container is kept separate from the runnable so slots always
    execute on the GUI thread regardless of which pool thread ran the job.
    """

    imageLoaded = Signal(int, Path, QImage)
    """Emitted with the request generation once the :class:`QImage` is ready."""

    loadFailed = Signal(int, Path, str)
    """Emitted with the request generation if decoding fails for any reason."""


class ImageLoadWorker(QRunnable):
    """Decode a ``QImage`` without blocking the UI."""

    def __init__(self, source: Path, generation: int) -> None:
        super().__init__()
        self._source = source
        self._generation = generation
        self.signals = ImageLoadWorkerSignals()

    @property
    def source(self) -> Path:
        return self._source

    @property
    def generation(self) -> int:
        return self._generation

    def run(self) -> None:  # type: ignore[override]
        try:
            image = image_loader.load_qimage(self._source)
        except Exception as exc:  # pragma: no cover - best effort propagation
            # Report instead of leaving the window waiting for a result that
            # never arrives.
            self.signals.loadFailed.emit(self._generation, self._source, str(exc))
            return

        if image is None or image.isNull():
            self.signals.loadFailed.emit(
                self._generation, self._source, "unsupported or corrupt image file"
            )
            return

        self.signals.imageLoaded.emit(self._generation, self._source, image)


__all__ = ["ImageLoadWorker", "ImageLoadWorkerSignals"]
