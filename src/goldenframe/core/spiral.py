"""Polyline sampling of the quarter-circle spiral."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..domain.models import Arc, DecompositionStep

DEFAULT_SAMPLES_PER_ARC = 24


def sample_arc(arc: Arc, samples: int = DEFAULT_SAMPLES_PER_ARC) -> NDArray[np.float64]:
    """Return ``(samples, 2)`` points along *arc*, endpoints included."""

    if samples < 2:
        raise ValueError("an arc needs at least two samples")
    # Unwrapped so arcs ending at 0 still sweep forward from 3π/2.
    angles = np.linspace(arc.start_angle, arc.start_angle + arc.sweep, samples)
    xs = arc.cx + arc.radius * np.cos(angles)
    ys = arc.cy + arc.radius * np.sin(angles)
    return np.column_stack((xs, ys))


def sample_spiral(
    steps: Sequence[DecompositionStep],
    samples_per_arc: int = DEFAULT_SAMPLES_PER_ARC,
) -> NDArray[np.float64]:
    """Concatenate the sampled arcs of *steps* into one polyline."""

    if not steps:
        return np.empty((0, 2), dtype=np.float64)
    return np.vstack([sample_arc(step.arc, samples_per_arc) for step in steps])


def joint_gaps(steps: Sequence[DecompositionStep]) -> NDArray[np.float64]:
    """Distance between each arc's end and the next arc's start."""

    if len(steps) < 2:
        return np.zeros(0, dtype=np.float64)
    ends = np.array([step.arc.end_point for step in steps[:-1]], dtype=np.float64)
    starts = np.array([step.arc.start_point for step in steps[1:]], dtype=np.float64)
    return np.hypot(*(starts - ends).T)


def max_joint_gap(steps: Sequence[DecompositionStep]) -> float:
    gaps = joint_gaps(steps)
    return float(gaps.max()) if gaps.size else 0.0


def polyline_length(points: NDArray[np.float64]) -> float:
    if len(points) < 2:
        return 0.0
    return float(np.sum(np.hypot(*np.diff(points, axis=0).T)))


def spiral_length(steps: Sequence[DecompositionStep]) -> float:
    """Exact length of the arc chain (``π/2 · r`` per step)."""

    return float(sum(step.arc.radius * step.arc.sweep for step in steps))


__all__ = [
    "DEFAULT_SAMPLES_PER_ARC",
    "joint_gaps",
    "max_joint_gap",
    "polyline_length",
    "sample_arc",
    "sample_spiral",
    "spiral_length",
]
