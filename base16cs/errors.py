class Base16csError(Exception):
    """Base class for every error raised by base16cs."""


class PaletteFormatError(Base16csError):
    """A palette document could not be read, parsed or validated."""


class TemplateError(Base16csError):
    """A template or partial failed to parse, or a render failed."""


class TemplateIOError(TemplateError):
    """A template or partial file could not be read."""


class ColorschemeNotFound(Base16csError, KeyError):
    """No built-in colorscheme with the requested name."""

    def __str__(self):
        return f'No colorscheme "{self.args[0]}"'
