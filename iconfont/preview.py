# -*- coding: utf-8 -*-
"""
Preview page listing every icon of the font, styled by the generated stylesheet.
"""

from __future__ import annotations

from .model import GenerationResult


def build_html_tags(result: GenerationResult) -> str:
    return "".join(
        f'<span><i class="apr apr-{identifier}"></i></span>' for identifier, _ in result.icons()
    )


def build_html(result: GenerationResult, icon_tags: str) -> str:
    # The blank line between the two style rules carries trailing spaces; keep it.
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Title</title>
    <link rel="stylesheet" href="{result.font_name}.css">
    <style>
        div {{
            max-width: 600px;
            width: 100%;
            margin: auto;
        }}
        
        span {{
            display: inline-block; padding: 6px;
        }}
    </style>
</head>
  <body>
    <div>
      {icon_tags}
    </div>
  </body>
</html>
"""
