"""Controllers wiring the desktop widgets to the rendering pipeline."""

from .render_controller import RenderController

__all__ = ["RenderController"]
