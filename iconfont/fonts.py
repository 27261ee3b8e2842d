# -*- coding: utf-8 -*-
"""
iconfont/fonts.py

Build an icon font family from a glob of SVG files.

Input:
  icons/*.svg  (any viewBox; the viewBox height is scaled to ascent - descent)

Output:
  <output_dir>/<font_name>.ttf
  <output_dir>/<font_name>.woff2
  <output_dir>/<font_name>.woff

Glyph naming:
- raw glyph name is the file stem when it already holds a '$', otherwise
  "<glyph_prefix>$<stem>"; the icon identifier is the segment after the first '$'.
- codepoints count up from start_codepoint (0xF101) in file-name order, except
  for stems/identifiers pinned through options.codepoints.

Dependencies:
  pip install fonttools brotli
"""

from __future__ import annotations

import asyncio
import glob
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.transform import Transform
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import SVGPath
from fontTools.ttLib import TTFont

from .config import FONT_FORMATS, FontOptions
from .model import GenerationError, GenerationResult, GlyphRecord, glyph_identifier


# Max deviation (font units) when converting cubic curves to TrueType quadratics
CU2QU_MAX_ERR = 1.0

NUM_RE = re.compile(r"[-+]?\d+(?:\.\d+)?")


@dataclass(frozen=True)
class SvgIcon:
    path: Path
    raw_name: str
    identifier: str
    codepoint: int
    glyph_name: str


# -----------------------------
# Naming
# -----------------------------
def glyph_name_from_cp(cp: int) -> str:
    if cp == 0x20:
        return "space"
    if cp > 0xFFFF:
        return f"u{cp:05X}"
    return f"uni{cp:04X}"


def raw_glyph_name(stem: str, prefix: str) -> str:
    if "$" in stem:
        return stem
    return f"{prefix}${stem}"


def list_svg_files(svg_pattern: str) -> List[Path]:
    return sorted(
        Path(p) for p in glob.glob(svg_pattern) if p.lower().endswith(".svg") and Path(p).is_file()
    )


def assign_codepoints(svg_paths: List[Path], options: FontOptions) -> List[SvgIcon]:
    """
    Give every SVG a raw glyph name and a codepoint.

    Pinned codepoints (options.codepoints, keyed by file stem or identifier) are
    reserved first; the rest are handed out in order from options.start_codepoint.
    """
    pinned: Set[int] = set(options.codepoints.values())
    next_cp = options.start_codepoint
    seen: Dict[int, Path] = {}
    icons: List[SvgIcon] = []

    for p in svg_paths:
        raw = raw_glyph_name(p.stem, options.glyph_prefix)
        ident = glyph_identifier(raw)

        cp: Optional[int] = options.codepoints.get(p.stem, options.codepoints.get(ident))
        if cp is None:
            while next_cp in pinned:
                next_cp += 1
            cp = next_cp
            next_cp += 1

        if cp in seen:
            raise GenerationError(f"Codepoint U+{cp:04X} assigned to both {seen[cp]} and {p}")
        seen[cp] = p

        icons.append(
            SvgIcon(path=p, raw_name=raw, identifier=ident, codepoint=cp, glyph_name=glyph_name_from_cp(cp))
        )

    return icons


# -----------------------------
# SVG -> TrueType outline
# -----------------------------
def _parse_number(s: str) -> float:
    m = NUM_RE.search(s)
    if not m:
        raise ValueError(f"Could not parse number from {s!r}")
    return float(m.group(0))


def read_view_box(root: ET.Element) -> Tuple[float, float, float, float]:
    """viewBox of the root <svg>, falling back to 0 0 width height."""
    vb = (root.attrib.get("viewBox") or "").replace(",", " ").split()
    if len(vb) == 4:
        x, y, w, h = (float(v) for v in vb)
    else:
        w_attr = root.attrib.get("width")
        h_attr = root.attrib.get("height")
        if not (w_attr and h_attr):
            raise ValueError("missing viewBox and width/height")
        x, y = 0.0, 0.0
        w, h = _parse_number(w_attr), _parse_number(h_attr)
    if w <= 0 or h <= 0:
        raise ValueError(f"non-positive viewBox size {w}x{h}")
    return x, y, w, h


def build_glyph_tt(svg_path: Path, ascent: int, descent: int) -> Tuple[object, int, int]:
    """Returns (glyph, advance width, left side bearing)."""
    try:
        data = svg_path.read_bytes()
        root = ET.fromstring(data)
        vb_x, vb_y, vb_w, vb_h = read_view_box(root)
    except (OSError, ET.ParseError, ValueError) as e:
        raise GenerationError(f"Could not read {svg_path}: {e}") from e

    scale = (ascent - descent) / vb_h
    # SVG y grows downward; fonts use y up. viewBox bottom sits on the descender.
    transform = Transform(scale, 0, 0, -scale, -vb_x * scale, (vb_y + vb_h) * scale + descent)

    tt_pen = TTGlyphPen(None)
    pen = TransformPen(Cu2QuPen(tt_pen, CU2QU_MAX_ERR, reverse_direction=True), transform)
    try:
        SVGPath.fromstring(data).draw(pen)
    except (ValueError, IndexError) as e:
        raise GenerationError(f"Could not parse path data in {svg_path}: {e}") from e

    glyph = tt_pen.glyph()
    glyph.recalcBounds(None)
    adv_w = int(round(vb_w * scale))
    return glyph, adv_w, getattr(glyph, "xMin", 0)


# -----------------------------
# Font builder
# -----------------------------
def build_ttf(font_name: str, icons: List[SvgIcon], options: FontOptions) -> FontBuilder:
    upm = options.units_per_em
    ascent = options.ascent
    descent = options.descent

    glyph_order = [".notdef", "space"] + [i.glyph_name for i in icons]
    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder(glyph_order)

    glyf: Dict[str, object] = {}
    hmtx: Dict[str, Tuple[int, int]] = {}

    # .notdef (simple rectangle)
    pen = TTGlyphPen(None)
    x0, y0 = 50, descent + 50
    x1, y1 = upm // 2 - 50, ascent - 50
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    glyf[".notdef"] = pen.glyph()
    hmtx[".notdef"] = (upm // 2, x0)

    glyf["space"] = TTGlyphPen(None).glyph()
    hmtx["space"] = (upm // 4, 0)

    for icon in icons:
        g, aw, lsb = build_glyph_tt(icon.path, ascent, descent)
        glyf[icon.glyph_name] = g
        hmtx[icon.glyph_name] = (aw, lsb)

    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)

    cmap: Dict[int, str] = {0x20: "space"}
    for icon in icons:
        cmap[icon.codepoint] = icon.glyph_name
    fb.setupCharacterMap(cmap)

    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=ascent,
        usWinDescent=-descent,
    )
    fb.setupNameTable(
        {
            "familyName": font_name,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"{font_name}-Regular",
            "fullName": f"{font_name} Regular",
            "psName": f"{font_name.replace(' ', '')}-Regular",
            "version": "Version 1.000",
        }
    )
    fb.setupPost()
    return fb


def save_formats(fb: FontBuilder, out_dir: Path, basename: str, formats: Tuple[str, ...]) -> Dict[str, Path]:
    buf = BytesIO()
    fb.save(buf)

    out_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for fmt in formats:
        out_path = out_dir / f"{basename}.{fmt}"
        tt = TTFont(BytesIO(buf.getvalue()))
        tt.flavor = None if fmt == "ttf" else fmt
        tt.save(out_path)
        print(f"Wrote {out_path.as_posix()}")
        written[fmt] = out_path
    return written


def build_font_family(
    font_name: str,
    svg_pattern: str,
    output_dir: Union[str, Path],
    options: Optional[FontOptions] = None,
) -> GenerationResult:
    options = options or FontOptions()
    if not font_name:
        raise GenerationError("Font name must not be empty")
    unknown = [f for f in options.formats if f not in FONT_FORMATS]
    if unknown:
        raise GenerationError(f"Unknown font format(s): {', '.join(unknown)} (expected {', '.join(FONT_FORMATS)})")

    svg_paths = list_svg_files(svg_pattern)
    if not svg_paths:
        raise GenerationError(f"No SVG files matched {svg_pattern!r}")

    print(f"Loading {len(svg_paths)} glyph(s) from {svg_pattern}…")
    icons = assign_codepoints(svg_paths, options)
    fb = build_ttf(font_name, icons, options)
    font_files = save_formats(fb, Path(output_dir), font_name, options.formats)

    glyphs_data = {
        icon.glyph_name: GlyphRecord(name=icon.raw_name, codepoint_hexa=f"{icon.codepoint:x}") for icon in icons
    }
    return GenerationResult(font_name=font_name, glyphs_data=glyphs_data, font_files=font_files)


async def generate_fonts(
    font_name: str,
    svg_pattern: str,
    output_dir: Union[str, Path],
    options: Optional[FontOptions] = None,
) -> GenerationResult:
    """Async front of build_font_family; the font work runs in a worker thread."""
    return await asyncio.to_thread(build_font_family, font_name, svg_pattern, output_dir, options)
