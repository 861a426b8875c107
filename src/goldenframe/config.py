"""Default configuration values for goldenframe."""

from __future__ import annotations

from typing import Final

# Aspect ratio the second panel is forced into.  The value is truncated to
# twelve decimals so canvas sizes stay reproducible across platforms.
GOLDEN_RATIO: Final[float] = 1.618033988749

# Longest side, in pixels, of both rendered panels.
MAX_DISPLAY_SIZE: Final[int] = 300

# ---------------------------------------------------------------------------
# Decomposition limits
# ---------------------------------------------------------------------------

# Hard cap on the number of squares cut from the canvas.
MAX_DECOMPOSITION_STEPS: Final[int] = 10

# A remainder narrower than this (in canvas units) ends the decomposition.
MIN_RECT_SIDE: Final[float] = 2.0

# ---------------------------------------------------------------------------
# Overlay styling
# ---------------------------------------------------------------------------

RECT_STROKE_COLOR: Final[str] = "#cccccc"
RECT_STROKE_WIDTH: Final[float] = 1.0
SQUARE_STROKE_COLOR: Final[str] = "#888888"
SQUARE_STROKE_WIDTH: Final[float] = 1.0
SPIRAL_STROKE_COLOR: Final[str] = "#fff344"
SPIRAL_STROKE_WIDTH: Final[float] = 2.0

# ---------------------------------------------------------------------------
# Status text
# ---------------------------------------------------------------------------

RATIO_LABEL_TEMPLATE: Final[str] = "Ratio: 1:{ratio:.3f}"
ANALYSIS_MESSAGE: Final[str] = (
    "The input image was converted to the golden ratio (1:1.618)."
)
DROP_HINT: Final[str] = "Drop an image here or click to choose a file"
STATUS_MESSAGE_TIMEOUT_MS: Final[int] = 5000
