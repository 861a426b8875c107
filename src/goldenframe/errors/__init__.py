"""Custom exception hierarchy for goldenframe."""

from __future__ import annotations


class GoldenFrameError(Exception):
    """Base class for all custom errors raised by goldenframe."""


# --- 3-layer hierarchy ---

class DomainError(GoldenFrameError):
    """Base class for geometry and sizing errors."""


class InfrastructureError(GoldenFrameError):
    """Base class for decoding and I/O errors."""


class ApplicationError(GoldenFrameError):
    """Base class for errors raised while handling user requests."""


# --- Domain errors ---

class InvalidRectangleError(DomainError):
    """Raised when a rectangle with non-positive or non-finite sides is decomposed."""


class InvalidDimensionsError(DomainError):
    """Raised when an image reports non-positive pixel dimensions."""


# --- Infrastructure errors ---

class ImageDecodeError(InfrastructureError):
    """Raised when a file cannot be decoded into a bitmap."""


# --- Application errors ---

class UnsupportedMediaError(ApplicationError):
    """Raised when a dropped file does not declare an image media type."""


__all__ = [
    "ApplicationError",
    "DomainError",
    "GoldenFrameError",
    "ImageDecodeError",
    "InfrastructureError",
    "InvalidDimensionsError",
    "InvalidRectangleError",
    "UnsupportedMediaError",
]
