"""Shared utility helpers."""

from fpm_pack.utils.paths import make_executable, write_text_file

__all__ = [
    "make_executable",
    "write_text_file",
]
