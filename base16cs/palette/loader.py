import logging
import numbers

import yaml

from ..errors import PaletteFormatError
from .model import BASE16_SIZE, BaseColor, Palette

logger = logging.getLogger(__name__)

_EXCERPT_LENGTH = 200


def palette_to_dict(palette):
    """Map a palette to plain data, in document key order."""
    return {
        "name": palette.name,
        "colors": [
            {"name": color.name, "lab": {"l": color.l, "a": color.a, "b": color.b}}
            for color in palette.colors
        ],
    }


def serialize_palette(palette):
    """Serialize a base palette to a YAML document.

    Coordinates are always floats, so they are written with a decimal point
    (``96.0``, not ``96``).

    Args:
        palette: The Palette to serialize

    Returns:
        str: YAML text with keys in the order name, colors, name, lab, l, a, b
    """
    try:
        return yaml.safe_dump(palette_to_dict(palette), sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as err:
        raise PaletteFormatError(
            f"Could not serialize palette to YAML:\n{palette!r}"
        ) from err


def _excerpt(text):
    if len(text) <= _EXCERPT_LENGTH:
        return text
    return text[:_EXCERPT_LENGTH] + "..."


def _require(mapping, key, kind, where, source):
    if not isinstance(mapping, dict) or key not in mapping:
        raise PaletteFormatError(f"{source}: missing field '{where}{key}'")
    value = mapping[key]
    if kind == "number":
        # bool is a numbers.Number too
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise PaletteFormatError(
                f"{source}: field '{where}{key}' must be a number, got {value!r}"
            )
    elif not isinstance(value, kind):
        raise PaletteFormatError(
            f"{source}: field '{where}{key}' must be a {kind.__name__}, got {value!r}"
        )
    return value


def palette_from_dict(data, size=BASE16_SIZE, source="<string>"):
    """Build a palette from plain data, validating every field.

    Raises:
        PaletteFormatError: a field is missing or mistyped, or the number of
            colors is not exactly ``size``
    """
    if not isinstance(data, dict):
        raise PaletteFormatError(f"{source}: palette document must be a mapping")

    name = _require(data, "name", str, "", source)
    raw_colors = _require(data, "colors", list, "", source)
    if len(raw_colors) != size:
        raise PaletteFormatError(
            f"{source}: palette '{name}' must have exactly {size} colors, got {len(raw_colors)}"
        )

    colors = []
    for i, raw in enumerate(raw_colors):
        where = f"colors[{i}]."
        if not isinstance(raw, dict):
            raise PaletteFormatError(f"{source}: '{where[:-1]}' must be a mapping")
        color_name = _require(raw, "name", str, where, source)
        lab = _require(raw, "lab", dict, where, source)
        l, a, b = (
            _require(lab, axis, "number", where + "lab.", source) for axis in ("l", "a", "b")
        )
        colors.append(BaseColor(color_name, l, a, b))

    return Palette(name, colors, size=size)


def deserialize_palette(text, size=BASE16_SIZE, source="<string>"):
    """Parse a YAML palette document.

    Args:
        text: YAML text
        size: Exact number of colors the palette must have
        source: Where the text came from, for error messages

    Returns:
        Palette
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise PaletteFormatError(
            f"Could not deserialize YAML to palette ({source}):\n{_excerpt(text)}"
        ) from err
    return palette_from_dict(data, size=size, source=source)


def load_palette(path, size=BASE16_SIZE):
    """Load a palette from a YAML file."""
    logger.debug("Loading palette: %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise PaletteFormatError(f"Could not read palette file: {path}") from err
    return deserialize_palette(text, size=size, source=str(path))


def save_palette(palette, path):
    """Write a palette to a YAML file."""
    text = serialize_palette(palette)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as err:
        raise PaletteFormatError(f"Could not write palette file: {path}") from err
