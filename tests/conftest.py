from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from iconfont.model import GenerationResult, GlyphRecord


SQUARE_SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M2 2h20v20H2z"/>'
    "</svg>\n"
)

ROUND_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48px" height="24px">'
    '<path d="M4 12C4 4 20 4 20 12C20 20 4 20 4 12Z"/>'
    "</svg>\n"
)


@pytest.fixture
def demo_result() -> GenerationResult:
    return GenerationResult(
        font_name="demo",
        glyphs_data={
            "uniE901": GlyphRecord(name="p$home", codepoint_hexa="e901"),
            "uniE902": GlyphRecord(name="p$search$old", codepoint_hexa="e902"),
            "uniE903": GlyphRecord(name="p$user", codepoint_hexa="e903"),
        },
    )


@pytest.fixture
def make_svg(tmp_path: Path) -> Callable[..., Path]:
    icons_dir = tmp_path / "icons"
    icons_dir.mkdir()

    def _make(stem: str, text: str = SQUARE_SVG) -> Path:
        path = icons_dir / f"{stem}.svg"
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def round_svg() -> str:
    return ROUND_SVG
