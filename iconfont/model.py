# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


class GenerationError(Exception):
    """Raised when the font family cannot be generated from the SVG input."""


class GlyphNameError(ValueError):
    """Raised when a glyph name carries no `$`-delimited icon identifier."""


def glyph_identifier(name: str) -> str:
    """
    Icon identifier of a raw glyph name: the segment after the first `$`.

      "prefix$home"  -> "home"
      "x$y$z"        -> "y"
    """
    parts = name.split("$")
    if len(parts) < 2 or not parts[1]:
        raise GlyphNameError(f"Glyph name {name!r} has no '$'-delimited identifier")
    return parts[1]


@dataclass(frozen=True)
class GlyphRecord:
    name: str
    codepoint_hexa: str  # lowercase, no prefix, e.g. "f101"

    @property
    def codepoint(self) -> int:
        return int(self.codepoint_hexa, 16)


@dataclass(frozen=True)
class GenerationResult:
    font_name: str
    glyphs_data: Dict[str, GlyphRecord]
    font_files: Dict[str, Path] = field(default_factory=dict)

    def icons(self) -> List[Tuple[str, GlyphRecord]]:
        # glyphs_data keeps insertion order, so every call (stylesheet, preview) yields the same sequence.
        return [(glyph_identifier(rec.name), rec) for rec in self.glyphs_data.values()]
