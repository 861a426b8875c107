from unittest.mock import MagicMock

from goldenframe.errors import (
    DomainError,
    GoldenFrameError,
    ImageDecodeError,
    InvalidRectangleError,
    UnsupportedMediaError,
)
from goldenframe.errors.handler import ErrorHandler, ErrorSeverity, describe_error


def test_hierarchy_layers():
    assert issubclass(InvalidRectangleError, DomainError)
    assert issubclass(ImageDecodeError, GoldenFrameError)
    assert not issubclass(UnsupportedMediaError, DomainError)


def test_errors_reach_the_ui_callback_with_user_text():
    logger = MagicMock()
    callback = MagicMock()
    handler = ErrorHandler(logger)
    handler.register_ui_callback(callback)

    handler.handle(ImageDecodeError("broken.png"), context={"source": "broken.png"})

    logger.error.assert_called_once()
    assert logger.error.call_args.kwargs["extra"] == {"source": "broken.png"}
    callback.assert_called_once_with("Could not load image: broken.png", ErrorSeverity.ERROR)


def test_warnings_are_only_logged():
    logger = MagicMock()
    callback = MagicMock()
    handler = ErrorHandler(logger)
    handler.register_ui_callback(callback)

    handler.handle(UnsupportedMediaError("notes.txt"), ErrorSeverity.WARNING)

    logger.warning.assert_called_once()
    callback.assert_not_called()


def test_describe_error_falls_back_to_message():
    assert describe_error(UnsupportedMediaError("a.txt")).endswith("a.txt")
    assert describe_error(ValueError("plain")) == "plain"
