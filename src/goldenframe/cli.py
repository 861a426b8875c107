"""Typer-based CLI entry point."""

from __future__ import annotations

import logging
import math
from enum import Enum
from functools import wraps
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich import print
from rich.logging import RichHandler
from rich.table import Table

from goldenframe.config import MAX_DISPLAY_SIZE
from goldenframe.core.decomposer import decompose, decompose_canvas
from goldenframe.core.sizing import (
    aspect_ratio,
    calculate_display_size,
    calculate_golden_size,
    format_ratio,
    orientation_for,
)
from goldenframe.core.spiral import max_joint_gap, polyline_length, sample_spiral, spiral_length
from goldenframe.domain.models import DecompositionStep, Orientation, Rect
from goldenframe.errors import DomainError, GoldenFrameError, ImageDecodeError
from goldenframe.utils.image_loader import read_image_size

app = typer.Typer(help="Golden-ratio decomposition overlay for raster images")


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ImageDecodeError, DomainError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except GoldenFrameError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def _configure(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False, help="Root logging level"
    ),
) -> None:
    logging.basicConfig(
        level=log_level.value.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _degrees(angle: float) -> str:
    return f"{math.degrees(angle):.0f}°"


def _steps_table(steps: Sequence[DecompositionStep]) -> Table:
    table = Table(title="Decomposition")
    for column in ("step", "phase", "rectangle", "square", "arc centre", "angles"):
        table.add_column(column)
    for step in steps:
        rect, square, arc = step.rect, step.square, step.arc
        table.add_row(
            str(step.index),
            str(step.phase),
            f"{rect.width:.2f}x{rect.height:.2f} @ ({rect.x:.2f}, {rect.y:.2f})",
            f"{square.size:.2f} @ ({square.x:.2f}, {square.y:.2f})",
            f"({arc.cx:.2f}, {arc.cy:.2f})",
            f"{_degrees(arc.start_angle)} → {_degrees(arc.end_angle)}",
        )
    return table


def _print_steps(steps: Sequence[DecompositionStep]) -> None:
    print(_steps_table(steps))
    print(
        f"Spiral length: {spiral_length(steps):.2f} "
        f"(sampled {polyline_length(sample_spiral(steps)):.2f})  "
        f"largest joint gap: {max_joint_gap(steps):.2e}"
    )


@app.command()
def show(
    image: Optional[Path] = typer.Argument(None, help="Image to open on start-up"),
    max_size: int = typer.Option(MAX_DISPLAY_SIZE, min=1, help="Longest panel side"),
) -> None:
    """Open the desktop window."""

    from goldenframe.gui.main import main as gui_main

    argv = ["goldenframe"] + ([str(image)] if image is not None else [])
    raise typer.Exit(gui_main(argv, max_size=max_size))


@app.command()
@_handle_errors
def inspect(
    image: Path = typer.Argument(..., exists=True, dir_okay=False),
    max_size: int = typer.Option(MAX_DISPLAY_SIZE, min=1, help="Longest panel side"),
) -> None:
    """Print the panel sizes and decomposition computed for IMAGE."""

    width, height = read_image_size(image)
    display = calculate_display_size(width, height, max_size)
    golden = calculate_golden_size(width, height, max_size)
    orientation = orientation_for(width, height)

    print(f"[bold]{image.name}[/bold] {width}x{height} ({orientation.value})")
    print(format_ratio(aspect_ratio(width, height)))
    print(f"Display panel: {display.width:.2f}x{display.height:.2f}")
    print(f"Golden panel:  {golden.width:.2f}x{golden.height:.2f}")
    _print_steps(decompose_canvas(golden.width, golden.height, orientation))


@app.command("decompose")
@_handle_errors
def decompose_command(
    width: float = typer.Argument(...),
    height: float = typer.Argument(...),
    portrait: bool = typer.Option(False, "--portrait", help="Use the portrait cycle"),
) -> None:
    """Print the decomposition of a WIDTH x HEIGHT rectangle at the origin."""

    orientation = Orientation.PORTRAIT if portrait else Orientation.LANDSCAPE
    _print_steps(decompose(Rect(0.0, 0.0, width, height), orientation))


if __name__ == "__main__":  # pragma: no cover
    app()
