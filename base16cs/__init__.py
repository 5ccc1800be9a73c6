"""
Define palettes of base colors in CIE L*a*b*, derive their sRGB values, and
render them into Liquid templates.
"""

from .errors import (
    Base16csError,
    ColorschemeNotFound,
    PaletteFormatError,
    TemplateError,
    TemplateIOError,
)
from .palette import (
    BASE16_SIZE,
    Base16Palette,
    BaseColor,
    DerivedColor,
    DerivedPalette,
    Palette,
    all_colorschemes,
    deserialize_palette,
    get_colorscheme,
    load_palette,
    serialize_palette,
)
from .template import LiquidTemplate, PaletteRenderer, RenderOptions

__version__ = "0.1.0"
