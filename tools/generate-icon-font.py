#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tools/generate-icon-font.py

Build the icon webfont from icons/*.svg and write its stylesheet and preview page.

Input:
  icons/*.svg

Output:
  dist/<font>.ttf, dist/<font>.woff2, dist/<font>.woff
  dist/<font>.css, dist/<font>.html

Dependencies:
  pip install fonttools brotli
"""

from __future__ import annotations

from iconfont.build import main


if __name__ == "__main__":
    main()
