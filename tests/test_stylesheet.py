import re

from iconfont.model import GenerationResult, GlyphRecord
from iconfont.stylesheet import build_css


def test_single_glyph_scenario() -> None:
    result = GenerationResult(font_name="demo", glyphs_data={"a": GlyphRecord(name="p$home", codepoint_hexa="e901")})
    css = build_css(result)

    assert '.icon-home:before {\n    content: "\\e901";\n }\n' in css
    assert 'font-family: "demo";' in css
    assert 'src: url("demo.ttf") format("embedded-opentype"),' in css
    assert 'url("demo.woff2") format("woff2"),' in css
    assert 'url("demo.woff") format("woff");' in css
    assert "  font-family: demo;\n" in css


def test_font_face_block_is_exact() -> None:
    css = build_css(GenerationResult(font_name="f", glyphs_data={}))
    assert css == (
        "@font-face {\n"
        '  font-family: "f";\n'
        '  src: url("f.ttf") format("embedded-opentype"),\n'
        '       url("f.woff2") format("woff2"),\n'
        '       url("f.woff") format("woff");\n'
        "}\n"
        "\n"
        ".icon {\n"
        "  font-family: f;\n"
        "  speak: none;\n"
        "  font-style: normal;\n"
        "  font-weight: normal;\n"
        "  font-variant: normal;\n"
        "  text-transform: none;\n"
        "  line-height: 1;\n"
        "  display: inline-block;\n"
        "  -webkit-font-smoothing: antialiased;\n"
        "  -moz-osx-font-smoothing: grayscale;\n"
        "}\n"
        "\n"
        ".icon:before {\n"
        "  --webkit-backface-visibility: hidden;\n"
        "  backface-visibility: hidden;\n"
        "}\n"
    )


def test_one_rule_per_glyph(demo_result: GenerationResult) -> None:
    css = build_css(demo_result)
    assert css.count(":before {\n    content:") == len(demo_result.glyphs_data)
    assert css.count(":before {") == len(demo_result.glyphs_data) + 1
    assert re.findall(r"\.icon-([\w-]+):before", css) == ["home", "search", "user"]


def test_empty_glyphs_only_static_rules() -> None:
    css = build_css(GenerationResult(font_name="demo", glyphs_data={}))
    assert "content:" not in css
    assert ".icon-" not in css
    assert css.count("@font-face") == 1


def test_build_css_is_idempotent(demo_result: GenerationResult) -> None:
    assert build_css(demo_result) == build_css(demo_result)
