"""Path and filesystem helper functions."""

from __future__ import annotations

import stat
from pathlib import Path

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def write_text_file(path: Path, content: str, *, executable: bool = False) -> Path:
    """Write UTF-8 content, creating parent directories and replacing any existing file."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    if executable:
        make_executable(path)
    return path


def make_executable(path: Path) -> Path:
    """Add execute permission for user, group and other (``chmod +x``)."""

    path.chmod(path.stat().st_mode | EXECUTE_BITS)
    return path
