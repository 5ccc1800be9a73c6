"""
CIE L*a*b* to sRGB conversion and hex formatting.

Lab values are interpreted against the D65 reference white. Channels that
fall outside the displayable range are clamped, so every finite input yields
a valid 8-bit color.
"""

import numpy as np

# D65 reference white (2 degree observer)
WHITE_D65 = np.array([0.95047, 1.0, 1.08883])

# CIE constants
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27

# Linear XYZ (D65) to linear sRGB
XYZ_TO_LINEAR_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)


def lab_to_xyz(l, a, b):
    """Convert CIE L*a*b* to CIE XYZ, scaled so the white point has Y = 1."""
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200

    f = np.array([fx, fy, fz], dtype=float)
    cubed = f**3
    linear = (116 * f - 16) / LAB_KAPPA
    xyz = np.where(cubed > LAB_EPSILON, cubed, linear)
    return xyz * WHITE_D65


def linear_to_srgb(channels):
    """Apply the sRGB transfer curve to linear channel values."""
    channels = np.asarray(channels, dtype=float)
    # abs() keeps the power defined for negative (out of gamut) channels,
    # which get clamped afterwards anyway
    curved = 1.055 * np.abs(channels) ** (1 / 2.4) - 0.055
    return np.where(channels <= 0.0031308, 12.92 * channels, curved)


def quantize(channels):
    """Clamp [0, 1] floats and quantize them to 8-bit ints.

    Rounds half away from zero. NaN channels become 0.

    Returns:
        tuple: (red, green, blue) as Python ints in [0, 255]
    """
    channels = np.nan_to_num(np.asarray(channels, dtype=float), nan=0.0)
    scaled = np.clip(channels, 0.0, 1.0) * 255
    return tuple(int(c) for c in np.floor(scaled + 0.5))


def lab_to_srgb(l, a, b):
    """Convert a CIE L*a*b* color to clamped 8-bit sRGB.

    Args:
        l: Lightness, conventionally 0-100
        a: Green-red axis
        b: Blue-yellow axis

    Returns:
        tuple: (red, green, blue) ints in [0, 255]
    """
    with np.errstate(invalid="ignore", over="ignore"):
        linear = XYZ_TO_LINEAR_SRGB @ lab_to_xyz(l, a, b)
        return quantize(linear_to_srgb(linear))


def rgb_to_hex(r, g, b):
    return f"{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))
