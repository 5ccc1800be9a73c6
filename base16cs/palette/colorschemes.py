"""Built-in colorschemes, keyed by palette name."""

from types import MappingProxyType

from ..errors import ColorschemeNotFound
from .model import Base16Palette, BaseColor

SELENIZED_DARK = Base16Palette(
    "Selenized dark",
    [
        BaseColor("bg_0", 23, -12, -12),  # base00 - default background
        BaseColor("bg_1", 28, -13, -13),  # base01 - lighter bg
        BaseColor("bg_2", 36, -13, -13),  # base02 - selection bg
        BaseColor("dim_0", 56, -8, -6),  # base03 - comments, invis
        BaseColor("fg_0", 75, -5, -2),  # base04 - dark foreground
        BaseColor("fg_1", 85, -5, -2),  # base05 - default foreground
        BaseColor("unused_0", 91, 0, 13),  # base06 - light fg
        BaseColor("unused_1", 96, 0, 13),  # base07 - light bg
        BaseColor("red", 60, 63, 40),  # base08 - vars, diff deleted
        BaseColor("orange", 67, 37, 50),  # base09 - ints, bools, consts
        BaseColor("magenta", 66, 55, -15),  # base0a - classes, search bg
        BaseColor("green", 69, -38, 55),  # base0b - strings, diff inserted
        BaseColor("cyan", 73, -40, -4),  # base0c - regex, escape chars
        BaseColor("blue", 60, 0, -57),  # base0d - funcs, headings
        BaseColor("yellow", 75, 6, 68),  # base0e - keywords, diff changed
        BaseColor("violet", 64, 30, -45),  # base0f - deprecated, embeds
    ],
)

SELENIZED_LIGHT = Base16Palette(
    "Selenized light",
    [
        BaseColor("bg_0", 96, 0, 13),  # base00 - default background
        BaseColor("bg_1", 91, 0, 13),  # base01 - darker bg
        BaseColor("bg_2", 82, 0, 13),  # base02 - selection bg
        BaseColor("dim_0", 62, -4, 1),  # base03 - comments, invis
        BaseColor("fg_0", 42, -6, -6),  # base04 - light foreground
        BaseColor("fg_1", 31, -6, -6),  # base05 - default foreground
        BaseColor("unused_0", 28, -13, -13),  # base06 - dark fg
        BaseColor("unused_1", 23, -12, -12),  # base07 - dark bg
        BaseColor("red", 46, 66, 42),  # base08 - vars, diff deleted
        BaseColor("orange", 52, 39, 52),  # base09 - ints, bools, consts
        BaseColor("magenta", 52, 58, -16),  # base0a - classes, search bg
        BaseColor("green", 54, -40, 58),  # base0b - strings, diff inserted
        BaseColor("cyan", 57, -42, -4),  # base0c - regex, escape chars
        BaseColor("blue", 46, 0, -60),  # base0d - funcs, headings
        BaseColor("yellow", 59, 6, 71),  # base0e - keywords, diff changed
        BaseColor("violet", 49, 32, -47),  # base0f - deprecated, embeds
    ],
)

# Solarized monotone shades
BASE03 = BaseColor("base03", 15, -12, -12)
BASE02 = BaseColor("base02", 20, -12, -12)
BASE01 = BaseColor("base01", 45, -7, -7)
BASE00 = BaseColor("base00", 50, -7, -7)
BASE0 = BaseColor("base0", 60, -6, -3)
BASE1 = BaseColor("base1", 65, -5, -2)
BASE2 = BaseColor("base2", 92, 0, 10)
BASE3 = BaseColor("base3", 97, 0, 10)

# Solarized accents
RED = BaseColor("red", 50, 65, 45)
ORANGE = BaseColor("orange", 50, 50, 55)
MAGENTA = BaseColor("magenta", 60, 65, -5)
GREEN = BaseColor("green", 60, -20, 65)
CYAN = BaseColor("cyan", 60, -35, -5)
BLUE = BaseColor("blue", 55, -10, -45)
YELLOW = BaseColor("yellow", 60, 10, 65)
VIOLET = BaseColor("violet", 50, 15, -45)

_SOLARIZED_ACCENTS = [RED, ORANGE, MAGENTA, GREEN, CYAN, BLUE, YELLOW, VIOLET]

SOLARIZED_DARK = Base16Palette(
    "Solarized dark",
    [BASE03, BASE02, BASE01, BASE00, BASE0, BASE1, BASE2, BASE3] + _SOLARIZED_ACCENTS,
)

SOLARIZED_LIGHT = Base16Palette(
    "Solarized light",
    [BASE3, BASE2, BASE1, BASE0, BASE00, BASE01, BASE02, BASE03] + _SOLARIZED_ACCENTS,
)


def _build_registry(palettes):
    registry = {}
    for palette in palettes:
        registry.setdefault(palette.name, palette)
    return MappingProxyType(registry)


_COLORSCHEMES = _build_registry(
    [SOLARIZED_DARK, SOLARIZED_LIGHT, SELENIZED_DARK, SELENIZED_LIGHT]
)


def all_colorschemes():
    """Return a read-only mapping of every built-in palette, keyed by name."""
    return _COLORSCHEMES


def get_colorscheme(name):
    try:
        return _COLORSCHEMES[name]
    except KeyError:
        raise ColorschemeNotFound(name) from None
