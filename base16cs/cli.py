import argparse
import logging
import sys

from .errors import Base16csError
from .export import serialize_derived_palette
from .palette import all_colorschemes, get_colorscheme, load_palette
from .template import LiquidTemplate, RenderOptions

# sysexits.h EX_CONFIG
EXIT_CONFIG = 78

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="base16cs",
        description=(
            "Render a Liquid template with a palette's derived sRGB colors, "
            "or print the derived palette as YAML"
        ),
    )
    parser.add_argument(
        "palette",
        nargs="?",
        default=None,
        metavar="PALETTE",
        help="Path to a palette YAML file",
    )
    parser.add_argument(
        "--colorscheme", "-c",
        metavar="NAME",
        help="Use a built-in colorscheme instead of a palette file",
    )
    parser.add_argument(
        "--template", "-t",
        metavar="PATH",
        help="Liquid template to render (default: print the derived palette)",
    )
    parser.add_argument(
        "--partials", "-p",
        metavar="DIR",
        action="append",
        default=[],
        help="Directory of *.liquid partials; may be repeated, later directories win",
    )
    parser.add_argument(
        "--unroll-colors-hex", "-u",
        action="store_true",
        help="Also bind each color's hex string to a variable named after the color",
    )
    parser.add_argument(
        "--list-colorschemes",
        action="store_true",
        help="List the built-in colorschemes and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_colorschemes:
        for name in sorted(all_colorschemes()):
            print(name)
        return 0

    # Validate arguments
    if args.palette and args.colorscheme:
        parser.error("Cannot use both PALETTE and --colorscheme")
    if not args.palette and not args.colorscheme:
        parser.error("Either PALETTE or --colorscheme is required")

    try:
        print(_run(args), end="")
    except Base16csError as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_CONFIG
    return 0


def _run(args):
    """Load the palette, then render the template or dump the derived palette."""
    if args.colorscheme:
        palette = get_colorscheme(args.colorscheme)
    else:
        palette = load_palette(args.palette)
    logger.debug("Using palette %r", palette.name)

    if not args.template:
        return serialize_derived_palette(palette)

    template = LiquidTemplate.parse_file(args.template, args.partials)
    options = RenderOptions(unroll_colors_hex=args.unroll_colors_hex)
    return template.render(palette, options)


if __name__ == "__main__":
    sys.exit(main())
