import logging
from enum import Enum
from typing import Callable, Optional

from . import ImageDecodeError, UnsupportedMediaError


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def describe_error(error: Exception) -> str:
    """Return the sentence shown to the user for *error*."""
    if isinstance(error, ImageDecodeError):
        return f"Could not load image: {error}"
    if isinstance(error, UnsupportedMediaError):
        return f"Only image files can be dropped: {error}"
    return str(error)


class ErrorHandler:
    def __init__(self, logger: logging.Logger):
        self._logger = logger
        self._ui_callback: Optional[Callable[[str, ErrorSeverity], None]] = None

    def register_ui_callback(self, callback: Callable[[str, ErrorSeverity], None]):
        self._ui_callback = callback

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method(f"{error.__class__.__name__}: {error}", extra=context or {})

        # Warnings stay in the log; only failures reach the window
        if self._ui_callback and severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            self._ui_callback(describe_error(error), severity)
