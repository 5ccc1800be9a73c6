"""
Base colors and palettes in canonical CIE L*a*b* form, and their derived
sRGB forms.

A base palette is the only persisted representation. Derived palettes are
computed from it on demand and never cached, so a change to the colorspace
conversion can never leave stale display values behind.
"""

from collections import namedtuple
from dataclasses import dataclass, field

from ..color import lab_to_srgb, rgb_to_hex

# See: https://github.com/chriskempson/base16/blob/main/styling.md
#
# base00..base07 are monotone shades:
#   base00 - default background
#   base01 - lighter bg
#   base02 - selection bg
#   base03 - comments, invis
#   base04 - dark foreground
#   base05 - default foreground
#   base06 - light fg
#   base07 - light bg
# base08..base0f are accent colors:
#   base08 - vars, diff deleted
#   base09 - ints, bools, consts
#   base0a - classes, search bg
#   base0b - strings, diff inserted
#   base0c - regex, escape chars
#   base0d - funcs, headings
#   base0e - keywords, diff changed
#   base0f - deprecated, embeds
BASE16_SIZE = 16

Lab = namedtuple("Lab", ["l", "a", "b"])
Srgb = namedtuple("Srgb", ["red", "green", "blue"])


@dataclass(frozen=True)
class BaseColor:
    """A named color in its canonical CIE L*a*b* form.

    Any finite (or even non-finite) coordinates are accepted; colors outside
    the sRGB gamut are clamped when derived.
    """

    name: str
    l: float
    a: float
    b: float

    def __post_init__(self):
        for axis in ("l", "a", "b"):
            object.__setattr__(self, axis, float(getattr(self, axis)))

    @property
    def lab(self):
        return Lab(self.l, self.a, self.b)


@dataclass(frozen=True)
class Palette:
    """A named, fixed-size, ordered collection of base colors.

    Slot order carries each color's role (see the Base16 layout above), so it
    is preserved everywhere a palette is copied or serialized.
    """

    name: str
    colors: tuple
    size: int = field(default=BASE16_SIZE)

    def __post_init__(self):
        colors = tuple(self.colors)
        if len(colors) != self.size:
            raise ValueError(
                f"Palette {self.name!r} needs exactly {self.size} colors, got {len(colors)}"
            )
        object.__setattr__(self, "colors", colors)

    def __iter__(self):
        return iter(self.colors)

    def __len__(self):
        return len(self.colors)


def Base16Palette(name, colors):
    """Create a palette with the 16 Base16 slots."""
    return Palette(name, colors, size=BASE16_SIZE)


@dataclass(frozen=True)
class DerivedColor:
    """A base color together with its computed sRGB values."""

    base: BaseColor
    srgb: Srgb
    srgb_hex: str

    @classmethod
    def from_base(cls, base):
        srgb = Srgb(*lab_to_srgb(base.l, base.a, base.b))
        return cls(base=base, srgb=srgb, srgb_hex=rgb_to_hex(*srgb))

    def to_dict(self):
        return {
            "base": {
                "name": self.base.name,
                "lab": dict(self.base.lab._asdict()),
            },
            "srgb": dict(self.srgb._asdict()),
            "srgb_hex": self.srgb_hex,
        }


@dataclass(frozen=True)
class DerivedPalette:
    """A palette's derived colors, index-aligned with the base palette."""

    name: str
    colors: tuple

    @classmethod
    def from_palette(cls, palette):
        return cls(
            name=palette.name,
            colors=tuple(DerivedColor.from_base(color) for color in palette.colors),
        )

    def to_dict(self):
        """Plain mapping of this palette, as bound into templates and dumped to YAML."""
        return {
            "name": self.name,
            "colors": [color.to_dict() for color in self.colors],
        }
