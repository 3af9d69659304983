from .base import BlockRenderer
from .canvas import CanvasRenderer, render_canvas

__all__ = ["BlockRenderer", "CanvasRenderer", "render_canvas"]
