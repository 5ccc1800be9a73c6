from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Rendering options.

    Attributes:
        unroll_colors_hex: Also bind each color's sRGB hex string as a
            top-level variable named after the color.
    """

    unroll_colors_hex: bool = False


class PaletteRenderer(ABC):
    """A parsed template that can render itself given a palette."""

    @abstractmethod
    def render(self, palette, options=None):
        """Render this template with ``palette`` injected.

        Args:
            palette: The base Palette to derive and inject
            options: RenderOptions, defaults to RenderOptions()

        Returns:
            str: The rendered text
        """
