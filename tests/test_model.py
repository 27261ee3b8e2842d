import pytest

from iconfont.model import GenerationResult, GlyphNameError, GlyphRecord, glyph_identifier


def test_identifier_is_segment_after_first_dollar() -> None:
    assert glyph_identifier("prefix$home") == "home"
    assert glyph_identifier("x$y$z") == "y"


@pytest.mark.parametrize("name", ["home", "", "prefix$"])
def test_identifier_requires_dollar_segment(name: str) -> None:
    with pytest.raises(GlyphNameError):
        glyph_identifier(name)


def test_glyph_name_error_is_value_error() -> None:
    assert issubclass(GlyphNameError, ValueError)


def test_codepoint_from_hexa() -> None:
    assert GlyphRecord(name="p$home", codepoint_hexa="f101").codepoint == 0xF101


def test_icons_follow_mapping_order(demo_result: GenerationResult) -> None:
    assert [ident for ident, _ in demo_result.icons()] == ["home", "search", "user"]
    assert [rec.codepoint_hexa for _, rec in demo_result.icons()] == ["e901", "e902", "e903"]


def test_icons_reject_unnamed_glyph() -> None:
    result = GenerationResult(font_name="demo", glyphs_data={"a": GlyphRecord(name="home", codepoint_hexa="e901")})
    with pytest.raises(GlyphNameError):
        result.icons()
