"""
Radix palette generator - command line entry point.
Derives base colors from a brand color, extracts the 12-step light/dark
scales from the Radix custom palette tool using Playwright, and writes CSS,
HTML and JSON outputs.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from .color import normalize_hex
from .config import build_config
from .pipeline import generate_palette, sources
from .render import print_swatches, save_outputs
from .theory import DEFAULT_SCHEME, Scheme, derive_base_palette, random_harmonious_color


def parse_brand_color(raw: Optional[str]) -> Optional[str]:
    if not raw or raw.strip().lower() == "random":
        return None
    try:
        return normalize_hex(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def parse_scheme(raw: str) -> Scheme:
    try:
        return Scheme.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-palette",
        description="Generate a light/dark 12-step accent and gray scale from a brand color",
    )
    parser.add_argument(
        "brand_color",
        nargs="?",
        type=parse_brand_color,
        help="Brand color as #RRGGBB or #RGB, or 'random' (default: random)",
    )
    parser.add_argument(
        "scheme",
        nargs="?",
        type=parse_scheme,
        default=DEFAULT_SCHEME,
        help="Harmony scheme: monochromatic, analogous, complementary, triadic (default: analogous)",
    )
    parser.add_argument("--output", "-o", default=".", help="Output directory")
    parser.add_argument("--url", help="Override the palette tool URL")
    parser.add_argument("--dom-contract", type=Path, help="JSON file overriding the tool's selectors")
    parser.add_argument("--timeout", type=int, help="Per-swatch dialog timeout in milliseconds")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the browser and use the deterministic fallback scales",
    )
    parser.add_argument("--debug", action="store_true", help="Run a visible, slowed-down browser")
    parser.add_argument("--no-html", action="store_true", help="Skip the HTML preview")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print errors")
    return parser


async def main_async(args: argparse.Namespace) -> int:
    verbose = not args.quiet
    try:
        config = build_config(
            url=args.url,
            dom_contract=args.dom_contract,
            timeout_ms=args.timeout,
            debug=args.debug,
            offline=args.offline,
            verbose=verbose,
        )
    except (OSError, ValueError) as exc:
        print(f"❌ Invalid configuration: {exc}", file=sys.stderr)
        return 2

    if verbose:
        print("🎨 Starting Color Palette Automation...\n")
    brand_color = args.brand_color
    if brand_color is None:
        brand_color = random_harmonious_color()
        if verbose:
            print(f"Generated random harmonious brand color: {brand_color}")
    if verbose:
        print(f"Using brand color: {brand_color}")
        print(f"Using color scheme: {args.scheme.value}\n")

    base = derive_base_palette(brand_color, args.scheme)
    if verbose:
        print("🎨 Generated base colors:")
        for role, value in base.as_dict().items():
            print(f"   {role}: {value}")
        print()

    try:
        palette = await generate_palette(base, config)
    except Exception as exc:
        # PaletteError from the pipeline, Playwright errors from browser launch
        print(f"❌ Error generating palette: {exc}", file=sys.stderr)
        return 1

    paths = save_outputs(palette, Path(args.output), with_html=not args.no_html)
    if verbose:
        print()
        print_swatches(palette)
        print(f"\n✅ Palette generated ({', '.join(sources(palette))})")
        for kind, path in paths.items():
            print(f"💾 {kind.upper()} saved to {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(asyncio.run(main_async(args)))

