from .colorschemes import all_colorschemes, get_colorscheme
from .loader import deserialize_palette, load_palette, save_palette, serialize_palette
from .model import (
    BASE16_SIZE,
    Base16Palette,
    BaseColor,
    DerivedColor,
    DerivedPalette,
    Lab,
    Palette,
    Srgb,
)

__all__ = [
    "BASE16_SIZE",
    "Base16Palette",
    "BaseColor",
    "DerivedColor",
    "DerivedPalette",
    "Lab",
    "Palette",
    "Srgb",
    "all_colorschemes",
    "deserialize_palette",
    "get_colorscheme",
    "load_palette",
    "save_palette",
    "serialize_palette",
]
