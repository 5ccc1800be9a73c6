from .base import PaletteRenderer, RenderOptions
from .liquid import LiquidTemplate
from .partials import load_partials

__all__ = ["LiquidTemplate", "PaletteRenderer", "RenderOptions", "load_partials"]
