# -*- coding: utf-8 -*-
"""Build an icon webfont from SVG files, plus its stylesheet and preview page."""

from __future__ import annotations

from .config import BuildConfig, FontOptions
from .model import GenerationError, GenerationResult, GlyphNameError, GlyphRecord

__all__ = [
    "BuildConfig",
    "FontOptions",
    "GenerationError",
    "GenerationResult",
    "GlyphNameError",
    "GlyphRecord",
]
