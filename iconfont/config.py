# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple


# Stylesheet and preview page land in dist/ beside the install location,
# whatever output directory the fonts are written to.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DIST_DIR = PROJECT_ROOT / "dist"

DEFAULT_FONT_NAME = "cnfmvjgnbjgvnfdjkvnfbfgjkvndklcndfo"
DEFAULT_SVG_PATTERN = "icons/*.svg"
DEFAULT_OUTPUT_DIR = "dist"

FONT_FORMATS = ("ttf", "woff2", "woff")
DEFAULT_START_CODEPOINT = 0xF101
DEFAULT_GLYPH_PREFIX = "icon"
DEFAULT_UPM = 1000
DEFAULT_ASCENT = 850
DEFAULT_DESCENT = -150


@dataclass(frozen=True)
class FontOptions:
    formats: Tuple[str, ...] = FONT_FORMATS
    start_codepoint: int = DEFAULT_START_CODEPOINT
    codepoints: Dict[str, int] = field(default_factory=dict)  # stem or identifier -> codepoint
    glyph_prefix: str = DEFAULT_GLYPH_PREFIX
    units_per_em: int = DEFAULT_UPM
    ascent: int = DEFAULT_ASCENT
    descent: int = DEFAULT_DESCENT


@dataclass(frozen=True)
class BuildConfig:
    font_name: str = DEFAULT_FONT_NAME
    svg_pattern: str = DEFAULT_SVG_PATTERN
    output_dir: str = DEFAULT_OUTPUT_DIR
    dist_dir: Path = DEFAULT_DIST_DIR
    options: FontOptions = field(default_factory=FontOptions)
