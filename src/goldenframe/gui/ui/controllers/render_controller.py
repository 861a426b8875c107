"""Sequences image loads and turns decoded bitmaps into rendered panels."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtCore import QObject, QThreadPool, Signal
from PySide6.QtGui import QImage

from ....config import MAX_DISPLAY_SIZE
from ....errors import GoldenFrameError, ImageDecodeError, UnsupportedMediaError
from ....errors.handler import ErrorHandler, ErrorSeverity, describe_error
from ....media_classifier import is_image_path
from ..overlay_renderer import OverlayStyle, RenderedPanels, render_panels
from ..tasks.image_load_worker import ImageLoadWorker

_LOGGER = logging.getLogger(__name__)


class RenderController(QObject):
    """Run at most one logical image task at a time, newest request wins.

    Every request bumps a generation counter that travels with the worker.
    Completions carrying an older generation are dropped, so a slow decode
    can never overwrite the panels of an image picked after it.
    """

    renderReady = Signal(Path, object)
    """Emitted with the source path and its :class:`RenderedPanels`."""

    renderFailed = Signal(Path, str)
    """Emitted with a user-facing message when the latest request fails."""

    busyChanged = Signal(bool)

    dropRejected = Signal(Path, str)
    """Emitted with a user-facing message when a drop carries no image."""

    cleared = Signal()
    """Emitted after :meth:`reset` discarded the current result."""

    def __init__(
        self,
        *,
        max_size: int = MAX_DISPLAY_SIZE,
        style: OverlayStyle | None = None,
        thread_pool: QThreadPool | None = None,
        error_handler: ErrorHandler | None = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._max_size = max_size
        self._style = style or OverlayStyle()
        self._pool = thread_pool
        self._errors = error_handler or ErrorHandler(_LOGGER)
        self._generation = 0
        self._busy = False
        self._active_worker: ImageLoadWorker | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_busy(self) -> bool:
        return self._busy

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def request_render(self, source: Path) -> int:
        """Start decoding *source*; returns the generation assigned to it."""

        self._generation += 1
        generation = self._generation
        worker = ImageLoadWorker(source, generation)
        worker.signals.imageLoaded.connect(self._on_image_loaded)
        worker.signals.loadFailed.connect(self._on_load_failed)
        self._active_worker = worker
        self._set_busy(True)
        _LOGGER.debug("Queued load of %s as generation %d", source, generation)
        (self._pool or QThreadPool.globalInstance()).start(worker)
        return generation

    def request_drop(self, paths: Sequence[Path]) -> Optional[int]:
        """Handle a drop: only the first file counts and it must declare an image type."""

        if not paths:
            return None
        source = paths[0]
        if not is_image_path(source):
            error = UnsupportedMediaError(source.name)
            self._errors.handle(error, ErrorSeverity.WARNING, context={"source": str(source)})
            self.dropRejected.emit(source, describe_error(error))
            return None
        return self.request_render(source)

    def render_image(self, source: Path, image: QImage) -> RenderedPanels | None:
        """Render an already decoded *image* synchronously and publish it."""

        try:
            panels = render_panels(image, self._max_size, self._style)
        except GoldenFrameError as exc:
            self._fail(source, exc)
            return None
        finally:
            self._set_busy(False)
        self.renderReady.emit(source, panels)
        return panels

    def reset(self) -> None:
        """Forget the current result and ignore anything still in flight."""

        self._generation += 1
        self._active_worker = None
        self._set_busy(False)
        self.cleared.emit()

    # ------------------------------------------------------------------
    # Worker callbacks
    # ------------------------------------------------------------------
    def _is_stale(self, generation: int, source: Path) -> bool:
        if generation == self._generation:
            return False
        _LOGGER.debug(
            "Dropping stale result for %s (generation %d, current %d)",
            source,
            generation,
            self._generation,
        )
        return True

    def _on_image_loaded(self, generation: int, source: Path, image: QImage) -> None:
        if self._is_stale(generation, source):
            return
        self._active_worker = None
        self.render_image(source, image)

    def _on_load_failed(self, generation: int, source: Path, message: str) -> None:
        if self._is_stale(generation, source):
            return
        self._active_worker = None
        self._fail(source, ImageDecodeError(f"{source.name}: {message}"))

    def _fail(self, source: Path, error: GoldenFrameError) -> None:
        self._set_busy(False)
        self._errors.handle(error, ErrorSeverity.ERROR, context={"source": str(source)})
        self.renderFailed.emit(source, describe_error(error))

    def _set_busy(self, busy: bool) -> None:
        if busy == self._busy:
            return
        self._busy = busy
        self.busyChanged.emit(busy)


__all__ = ["RenderController"]
