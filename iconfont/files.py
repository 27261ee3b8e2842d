# -*- coding: utf-8 -*-

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Union


def write_text_lf(path: Path, text: str) -> None:
    # Encoded before opening: unencodable text leaves the target untouched.
    # Parent directory must already exist.
    data = text.encode("utf-8")
    with open(path, "wb") as f:
        f.write(data)


async def write_text(path: Union[str, Path], content: str, label: str) -> bool:
    """
    Write `content` to `path` off the event loop and log the outcome.

    Returns False (after logging to stderr) instead of raising when the write fails.
    """
    path = Path(path)
    try:
        await asyncio.to_thread(write_text_lf, path, content)
    except (OSError, UnicodeError) as e:
        print(f"Error writing {label} file: {e}", file=sys.stderr)
        return False
    print(f"✓ {label} file created at {path.as_posix()}")
    return True
