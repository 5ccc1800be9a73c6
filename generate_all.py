#!/usr/bin/env python3
"""
Render every template against every palette.
Writes out/<palette>/<template name without .liquid>.
"""

import argparse
import subprocess
import sys
from pathlib import Path


def main():
    root = Path(__file__).parent

    parser = argparse.ArgumentParser(
        description="Render every Liquid template with every palette"
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=root / "templates",
        help="Directory of *.liquid templates (default: templates/)",
    )
    parser.add_argument(
        "--palettes",
        type=Path,
        default=root / "palettes",
        help="Directory of palette *.yaml files (default: palettes/)",
    )
    parser.add_argument(
        "--partials",
        type=Path,
        action="append",
        default=[],
        help="Partials directory, may be repeated",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=root / "out",
        help="Output directory (default: out/)",
    )
    parser.add_argument(
        "--builtin",
        action="store_true",
        help="Also render every built-in colorscheme",
    )
    parser.add_argument(
        "--unroll-colors-hex",
        action="store_true",
        help="Bind each color's hex string to its name",
    )
    args = parser.parse_args()

    templates = []
    if args.templates.exists():
        templates = sorted(args.templates.glob("*.liquid"))

    # (output folder name, CLI palette arguments)
    sources = []
    if args.palettes.exists():
        for path in sorted(args.palettes.iterdir()):
            if path.suffix.lower() in {".yaml", ".yml"}:
                sources.append((path.stem, [str(path)]))
    if args.builtin:
        for name in _builtin_names():
            sources.append((name.lower().replace(" ", "-"), ["--colorscheme", name]))

    if not templates or not sources:
        print(f"No templates in {args.templates} or no palettes in {args.palettes}")
        return 1

    print(f"Found {len(templates)} templates and {len(sources)} palettes to render\n")

    failures = 0
    for palette_name, palette_args in sources:
        palette_out_dir = args.out / palette_name
        palette_out_dir.mkdir(parents=True, exist_ok=True)

        print(f"{'=' * 60}")
        print(f"Rendering palette: {palette_name}")
        print(f"{'=' * 60}")

        for template_path in templates:
            cmd = [sys.executable, "-m", "base16cs", *palette_args, "-t", str(template_path)]
            for partials_dir in args.partials:
                cmd.extend(["-p", str(partials_dir)])
            if args.unroll_colors_hex:
                cmd.append("-u")

            result = subprocess.run(cmd, capture_output=True, text=True)

            if result.returncode != 0:
                print(f"Error rendering {template_path.name}: {result.stderr.strip()}")
                failures += 1
                continue

            out_path = palette_out_dir / template_path.stem
            out_path.write_text(result.stdout, encoding="utf-8")
            print(f"  - {out_path}")
        print()

    print(f"{'=' * 60}")
    print(f"Done! {failures} failure(s). Output in:")
    print(f"  {args.out}")
    print(f"{'=' * 60}")
    return 1 if failures else 0


def _builtin_names():
    """List built-in colorschemes via the CLI, so this script needs no import path setup."""
    result = subprocess.run(
        [sys.executable, "-m", "base16cs", "--list-colorschemes"],
        capture_output=True,
        text=True,
        check=True,
    )
    return [line for line in result.stdout.splitlines() if line]


if __name__ == "__main__":
    sys.exit(main())
