import dataclasses

import pytest

from base16cs import ColorschemeNotFound
from base16cs.palette import (
    BASE16_SIZE,
    Base16Palette,
    BaseColor,
    DerivedPalette,
    Lab,
    Palette,
    Srgb,
    all_colorschemes,
    get_colorscheme,
)
from base16cs.palette.colorschemes import SELENIZED_DARK, SOLARIZED_LIGHT


def test_base_color_coerces_coordinates_to_float():
    color = BaseColor("bg", 96, 0, 13)
    assert color.lab == Lab(96.0, 0.0, 13.0)
    assert all(isinstance(v, float) for v in color.lab)


def test_base_color_equality_is_structural():
    assert BaseColor("bg", 96, 0, 13) == BaseColor("bg", 96.0, 0.0, 13.0)
    assert BaseColor("bg", 96, 0, 13) != BaseColor("bg_0", 96, 0, 13)
    assert BaseColor("bg", 96, 0, 13) != BaseColor("bg", 96, 0, 12)


def test_base_color_is_immutable():
    color = BaseColor("bg", 96, 0, 13)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.l = 50


def test_palette_keeps_order(palette):
    assert len(palette) == BASE16_SIZE
    assert [c.name for c in palette][:3] == ["bg_0", "bg_1", "bg_2"]
    assert isinstance(palette.colors, tuple)


def test_palette_equality_is_structural(palette):
    copy = Base16Palette(palette.name, list(palette.colors))
    assert copy == palette

    swapped = list(palette.colors)
    swapped[0], swapped[1] = swapped[1], swapped[0]
    assert Base16Palette(palette.name, swapped) != palette


@pytest.mark.parametrize("count", [0, 15, 17])
def test_palette_rejects_wrong_size(palette, count):
    colors = (list(palette.colors) * 2)[:count]
    with pytest.raises(ValueError):
        Base16Palette("Bad", colors)


def test_palette_of_other_size():
    palette = Palette(
        "My Palette",
        [BaseColor("bg", 96, 0, 13), BaseColor("fg", 31, -6, -6)],
        size=2,
    )
    assert len(palette) == 2


def test_derived_palette_matches_source_order(palette):
    derived = DerivedPalette.from_palette(palette)
    assert derived.name == palette.name
    assert len(derived.colors) == len(palette.colors)
    for base, color in zip(palette.colors, derived.colors):
        assert color.base == base
    assert derived.colors[0].srgb == Srgb(254, 243, 218)
    assert derived.colors[5].srgb_hex == "384c52"


def test_derived_palette_is_recomputed(palette):
    assert DerivedPalette.from_palette(palette) is not DerivedPalette.from_palette(palette)
    assert DerivedPalette.from_palette(palette) == DerivedPalette.from_palette(palette)


def test_derived_palette_to_dict():
    palette = Palette("My Palette", [BaseColor("bg", 96, 0, 13)], size=1)
    assert DerivedPalette.from_palette(palette).to_dict() == {
        "name": "My Palette",
        "colors": [
            {
                "base": {"name": "bg", "lab": {"l": 96.0, "a": 0.0, "b": 13.0}},
                "srgb": {"red": 254, "green": 243, "blue": 218},
                "srgb_hex": "fef3da",
            }
        ],
    }


def test_all_colorschemes():
    colorschemes = all_colorschemes()
    assert set(colorschemes) == {
        "Selenized dark",
        "Selenized light",
        "Solarized dark",
        "Solarized light",
    }
    for name, palette in colorschemes.items():
        assert palette.name == name
        assert len(palette) == BASE16_SIZE


def test_colorschemes_are_read_only():
    with pytest.raises(TypeError):
        all_colorschemes()["Mine"] = SELENIZED_DARK


def test_get_colorscheme():
    assert get_colorscheme("Solarized light") is SOLARIZED_LIGHT


def test_get_unknown_colorscheme():
    with pytest.raises(ColorschemeNotFound) as excinfo:
        get_colorscheme("Nope")
    assert str(excinfo.value) == 'No colorscheme "Nope"'
    assert isinstance(excinfo.value, KeyError)
