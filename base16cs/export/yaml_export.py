import yaml

from ..errors import PaletteFormatError
from ..palette import DerivedPalette


def serialize_derived_palette(palette):
    """Derive a palette and dump it as YAML.

    Args:
        palette: The base Palette

    Returns:
        YAML string with each color's base, srgb and srgb_hex values
    """
    derived = DerivedPalette.from_palette(palette)
    try:
        return yaml.safe_dump(derived.to_dict(), sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as err:
        raise PaletteFormatError(
            f"Could not serialize derived palette:\n{derived!r}"
        ) from err


def export_derived_palette(palette, filepath):
    """Write the derived form of a palette to a YAML file."""
    text = serialize_derived_palette(palette)
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as err:
        raise PaletteFormatError(f"Could not write derived palette file: {filepath}") from err
