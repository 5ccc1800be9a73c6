"""
Liquid template rendering.

A template is parsed once, then rendered any number of times with a palette.
Each render derives the palette's sRGB values afresh and binds them to the
``palette`` variable; optionally each color's hex string is also bound to a
variable named after the color:

    {{ palette.name }}
    {% for color in palette.colors %}{{ color.base.name }}: #{{ color.srgb_hex }}
    {% endfor %}
    background: #{{ bg_0 }}

Undefined variables are errors, so a template that expects unrolled colors
fails loudly when rendered without them.
"""

import logging
from pathlib import Path

from liquid import DictLoader, Environment, StrictUndefined
from liquid.exceptions import Error as LiquidError
from liquid.exceptions import TemplateNotFound

from ..errors import TemplateError
from ..palette import DerivedPalette
from .base import PaletteRenderer, RenderOptions
from .partials import PARTIAL_SUFFIX, load_partials, read_template_file

logger = logging.getLogger(__name__)


class PartialLoader(DictLoader):
    """In-memory partials, found by basename with or without the .liquid suffix."""

    def get_source(self, env, template_name, *args, **kwargs):
        try:
            return super().get_source(env, template_name, *args, **kwargs)
        except TemplateNotFound as err:
            if template_name.endswith(PARTIAL_SUFFIX):
                raise
            try:
                return super().get_source(
                    env, template_name + PARTIAL_SUFFIX, *args, **kwargs
                )
            except TemplateNotFound:
                raise err from None


def build_environment(partials):
    """Build a strict Liquid environment, checking every partial's syntax.

    Args:
        partials: dict of basename -> (path, source)
    """
    env = Environment(
        loader=PartialLoader({name: source for name, (_, source) in partials.items()}),
        undefined=StrictUndefined,
    )
    for name, (path, source) in partials.items():
        try:
            env.from_string(source, name=name, path=path)
        except LiquidError as err:
            raise TemplateError(f"Could not parse Liquid partial file: {path}\n{err}") from err
    return env


class LiquidTemplate(PaletteRenderer):
    """A parsed Liquid template."""

    def __init__(self, path, template):
        self.path = path
        self.template = template

    @classmethod
    def parse_file(cls, path, partials_dirs=()):
        """Parse a Liquid template file.

        Args:
            path: The template file
            partials_dirs: Directories, if any, holding ``*.liquid`` partials
                for ``{% render %}`` and ``{% include %}`` tags

        Returns:
            LiquidTemplate ready to render
        """
        path = Path(path)
        partials = load_partials(partials_dirs)
        source = read_template_file(path)
        return cls._parse(source, path, partials)

    @classmethod
    def from_string(cls, source, partials=None, path="<string>"):
        """Parse a template held in memory.

        ``partials`` maps partial names to their source text.
        """
        partials = {name: (name, text) for name, text in (partials or {}).items()}
        return cls._parse(source, path, partials)

    @classmethod
    def _parse(cls, source, path, partials):
        env = build_environment(partials)
        try:
            template = env.from_string(source, path=path)
        except LiquidError as err:
            raise TemplateError(f"Could not parse Liquid template file: {path}\n{err}") from err
        logger.debug("Parsed %s with %d partial(s)", path, len(partials))
        return cls(path, template)

    def render(self, palette, options=None):
        """Render this template with ``palette`` bound as ``palette``.

        With ``options.unroll_colors_hex`` each color's hex string is also
        bound under the color's name. A name used twice takes the later
        color's value.
        """
        options = options or RenderOptions()
        derived = DerivedPalette.from_palette(palette)

        variables = {"palette": derived.to_dict()}
        if options.unroll_colors_hex:
            for color in derived.colors:
                variables[color.base.name] = color.srgb_hex

        try:
            rendered = self.template.render(variables)
        except LiquidError as err:
            raise TemplateError(
                f'Could not render Liquid template "{self.path}" with palette '
                f"{palette.name!r}:\n{err}"
            ) from err

        logger.debug("Rendered %s with palette %r", self.path, palette.name)
        return rendered
