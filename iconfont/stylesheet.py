# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List

from .model import GenerationResult


def font_face_block(font_name: str) -> str:
    return f"""@font-face {{
  font-family: "{font_name}";
  src: url("{font_name}.ttf") format("embedded-opentype"),
       url("{font_name}.woff2") format("woff2"),
       url("{font_name}.woff") format("woff");
}}

.icon {{
  font-family: {font_name};
  speak: none;
  font-style: normal;
  font-weight: normal;
  font-variant: normal;
  text-transform: none;
  line-height: 1;
  display: inline-block;
  -webkit-font-smoothing: antialiased;
  -moz-osx-font-smoothing: grayscale;
}}

.icon:before {{
  --webkit-backface-visibility: hidden;
  backface-visibility: hidden;
}}
"""


def icon_rule(identifier: str, codepoint_hexa: str) -> str:
    return f"""
.icon-{identifier}:before {{
    content: "\\{codepoint_hexa}";
 }}
"""


def build_css(result: GenerationResult) -> str:
    parts: List[str] = [font_face_block(result.font_name)]
    for identifier, rec in result.icons():
        parts.append(icon_rule(identifier, rec.codepoint_hexa))
    return "".join(parts)
