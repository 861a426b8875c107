"""Background workers used by the desktop window."""

from .image_load_worker import ImageLoadWorker, ImageLoadWorkerSignals

__all__ = ["ImageLoadWorker", "ImageLoadWorkerSignals"]
