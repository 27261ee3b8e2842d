# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import Awaitable, List, Optional

from .config import FONT_FORMATS, BuildConfig, FontOptions
from .files import write_text
from .fonts import generate_fonts
from .preview import build_html, build_html_tags
from .stylesheet import build_css


MAX_CODEPOINT = 0x10FFFF


async def run(config: BuildConfig) -> Optional[Awaitable[List[bool]]]:
    """
    Generate the font family, then write <font_name>.css and <font_name>.html
    into config.dist_dir.

    Generation errors are logged and swallowed (returns None, nothing written).
    Otherwise both writes are already running when this returns; the returned
    handle resolves to [css_ok, html_ok] and one failed write never cancels the other.
    """
    try:
        result = await generate_fonts(config.font_name, config.svg_pattern, config.output_dir, config.options)
        css_content = build_css(result)
        html_text = build_html(result, build_html_tags(result))
    except Exception as e:
        print(f"Error generating fonts: {e}", file=sys.stderr)
        return None

    dist_dir = Path(config.dist_dir)
    css_path = dist_dir / f"{result.font_name}.css"
    html_path = dist_dir / f"{result.font_name}.html"

    return asyncio.gather(
        write_text(css_path, css_content, "CSS"),
        write_text(html_path, html_text, "HTML"),
    )


async def build(config: BuildConfig) -> bool:
    """Run the build and wait for both writes. True when everything was written."""
    pending = await run(config)
    if pending is None:
        return False
    return all(await pending)


def parse_codepoint(value: str) -> int:
    try:
        cp = int(value, 0) if value.lower().startswith("0x") else int(value, 16)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid codepoint: {value!r}") from e
    if not 0 <= cp <= MAX_CODEPOINT:
        raise argparse.ArgumentTypeError(f"codepoint out of range 0..{MAX_CODEPOINT:X}: {value!r}")
    return cp


def parse_formats(value: str) -> tuple:
    formats = tuple(f.strip().lower() for f in value.split(",") if f.strip())
    unknown = [f for f in formats if f not in FONT_FORMATS]
    if not formats or unknown:
        raise argparse.ArgumentTypeError(f"formats must be a comma-separated subset of {','.join(FONT_FORMATS)}")
    return formats


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    defaults = BuildConfig()
    options = replace(
        FontOptions(),
        formats=args.formats,
        start_codepoint=args.start_codepoint,
        glyph_prefix=args.glyph_prefix,
        units_per_em=args.upm,
    )
    return replace(
        defaults,
        font_name=args.font_name,
        svg_pattern=args.svg_pattern,
        output_dir=args.output_dir,
        dist_dir=Path(args.dist_dir) if args.dist_dir else defaults.dist_dir,
        options=options,
    )


def main(argv: Optional[List[str]] = None) -> None:
    defaults = BuildConfig()
    ap = argparse.ArgumentParser(
        description="Build an icon webfont from SVG files, plus a CSS stylesheet and an HTML preview page."
    )
    ap.add_argument("--font-name", default=defaults.font_name, help=f"Font name (default: {defaults.font_name})")
    ap.add_argument("--svg-pattern", default=defaults.svg_pattern, help=f"Glob of input SVGs (default: {defaults.svg_pattern})")
    ap.add_argument("--output-dir", default=defaults.output_dir, help=f"Font output folder (default: {defaults.output_dir})")
    ap.add_argument(
        "--dist-dir",
        default=None,
        help=f"Folder for the .css/.html files; must exist (default: {defaults.dist_dir.as_posix()})",
    )
    ap.add_argument(
        "--formats",
        type=parse_formats,
        default=defaults.options.formats,
        help=f"Comma-separated font formats (default: {','.join(FONT_FORMATS)})",
    )
    ap.add_argument(
        "--start-codepoint",
        type=parse_codepoint,
        default=defaults.options.start_codepoint,
        help=f"First codepoint handed out, hexadecimal (default: {defaults.options.start_codepoint:X})",
    )
    ap.add_argument("--glyph-prefix", default=defaults.options.glyph_prefix, help=f"Prefix for glyph names without '$' (default: {defaults.options.glyph_prefix})")
    ap.add_argument("--upm", type=int, default=defaults.options.units_per_em, help=f"Units per em (default: {defaults.options.units_per_em})")
    ap.add_argument("--strict", action="store_true", help="Exit with status 1 when generation or a write fails")
    args = ap.parse_args(argv)

    ok = asyncio.run(build(config_from_args(args)))
    if args.strict and not ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
