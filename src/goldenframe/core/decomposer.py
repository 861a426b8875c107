"""Golden-rectangle decomposition.

The canvas is repeatedly split into a square and a remainder rectangle.  For
every step the square's corner, the arc pivot and the surviving side are read
from :data:`STEP_RULES`, a table indexed by orientation and ``index % 4``.
Consecutive arcs share an endpoint so the quarter circles trace one continuous
curve approximating the golden spiral.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

from ..config import MAX_DECOMPOSITION_STEPS, MIN_RECT_SIDE
from ..domain.models import (
    Arc,
    Corner,
    DecompositionStep,
    Orientation,
    Rect,
    Side,
    Square,
)
from ..errors import InvalidRectangleError

_LOGGER = logging.getLogger(__name__)

_TAU = 2.0 * math.pi


@dataclass(frozen=True)
class StepRule:
    """Placement rule for one phase of the four-step cycle."""

    square_corner: Corner
    """Corner of the active rectangle occupied by the square."""

    pivot: Corner
    """Corner of the square that carries the arc centre."""

    start_angle: float

    remainder: Side
    """Side of the active rectangle that survives once the square is cut."""


_LANDSCAPE_CYCLE: Final[tuple[StepRule, ...]] = (
    StepRule(Corner.TOP_LEFT, Corner.BOTTOM_RIGHT, math.pi, Side.RIGHT),
    StepRule(Corner.TOP_LEFT, Corner.BOTTOM_LEFT, 1.5 * math.pi, Side.BOTTOM),
    StepRule(Corner.TOP_RIGHT, Corner.TOP_LEFT, 0.0, Side.LEFT),
    StepRule(Corner.BOTTOM_LEFT, Corner.TOP_RIGHT, 0.5 * math.pi, Side.TOP),
)

# An upright golden canvas enters the same cycle a quarter turn earlier: its
# first cut keeps the top part, which is the landscape cycle's last phase.
_PORTRAIT_CYCLE: Final[tuple[StepRule, ...]] = _LANDSCAPE_CYCLE[3:] + _LANDSCAPE_CYCLE[:3]

STEP_RULES: Final[dict[Orientation, tuple[StepRule, ...]]] = {
    Orientation.LANDSCAPE: _LANDSCAPE_CYCLE,
    Orientation.PORTRAIT: _PORTRAIT_CYCLE,
}


def rule_for(index: int, orientation: Orientation) -> StepRule:
    """Return the placement rule for step *index*."""

    return STEP_RULES[orientation][index % 4]


def place_square(rect: Rect, rule: StepRule) -> Square:
    """Return the square inscribed in *rect* on the corner selected by *rule*."""

    size = rect.min_side
    if rule.square_corner in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT):
        x = rect.x
    else:
        x = rect.right - size
    if rule.square_corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT):
        y = rect.y
    else:
        y = rect.bottom - size
    return Square(x, y, size)


def trace_arc(square: Square, rule: StepRule) -> Arc:
    """Return the quarter circle drawn inside *square* for *rule*."""

    cx, cy = square.corner(rule.pivot)
    end = (rule.start_angle + math.pi / 2) % _TAU
    return Arc(cx, cy, square.size, rule.start_angle, end)


def cut_square(rect: Rect, index: int, orientation: Orientation) -> Rect:
    """Return the rectangle left after removing step *index*'s square slice.

    The slice is ``min(width, height)`` thick and is taken from the side
    opposite to the rule's remainder.  The result may be degenerate; callers
    decide whether to continue.
    """

    size = rect.min_side
    remainder = rule_for(index, orientation).remainder
    if remainder is Side.RIGHT:
        return Rect(rect.x + size, rect.y, rect.width - size, rect.height)
    if remainder is Side.BOTTOM:
        return Rect(rect.x, rect.y + size, rect.width, rect.height - size)
    if remainder is Side.LEFT:
        return Rect(rect.x, rect.y, rect.width - size, rect.height)
    return Rect(rect.x, rect.y, rect.width, rect.height - size)


def decompose(
    rect: Rect,
    orientation: Orientation,
    *,
    max_steps: int = MAX_DECOMPOSITION_STEPS,
    min_side: float = MIN_RECT_SIDE,
) -> tuple[DecompositionStep, ...]:
    """Split *rect* into an ordered sequence of squares and spiral arcs.

    The loop records the active rectangle, cuts its square and stops either
    after *max_steps* steps or as soon as the next remainder would be thinner
    than *min_side* in either dimension.  The active rectangle of the last
    step is always recorded, so the result is never empty.

    Raises:
        InvalidRectangleError: if *rect* has a non-positive or non-finite side.
    """

    if not rect.is_valid():
        raise InvalidRectangleError(
            f"cannot decompose rectangle {rect.width!r}x{rect.height!r} at ({rect.x!r}, {rect.y!r})"
        )
    if max_steps < 1:
        raise InvalidRectangleError(f"max_steps must be positive, got {max_steps}")

    steps: list[DecompositionStep] = []
    current = rect
    for index in range(max_steps):
        rule = rule_for(index, orientation)
        square = place_square(current, rule)
        steps.append(DecompositionStep(index, current, square, trace_arc(square, rule)))

        following = cut_square(current, index, orientation)
        if following.width < min_side or following.height < min_side:
            break
        current = following

    _LOGGER.debug(
        "Decomposed %.2fx%.2f (%s) into %d steps",
        rect.width,
        rect.height,
        orientation.value,
        len(steps),
    )
    return tuple(steps)


def decompose_canvas(
    width: float,
    height: float,
    orientation: Orientation,
) -> tuple[DecompositionStep, ...]:
    """Decompose a canvas of *width* x *height* anchored at the origin."""

    return decompose(Rect(0.0, 0.0, float(width), float(height)), orientation)


__all__ = [
    "STEP_RULES",
    "StepRule",
    "cut_square",
    "decompose",
    "decompose_canvas",
    "place_square",
    "rule_for",
    "trace_arc",
]
