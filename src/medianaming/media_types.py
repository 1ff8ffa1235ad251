"""Extension-based media type tests."""

from __future__ import annotations

from .config import NamingOptions
from .paths import extension


def is_video_file(path: str, options: NamingOptions) -> bool:
    return extension(path).lower() in options.video_file_extensions


def is_audio_file(path: str, options: NamingOptions) -> bool:
    return extension(path).lower() in options.audio_file_extensions


def is_stub_file(path: str, options: NamingOptions) -> bool:
    return extension(path).lower() in options.stub_file_extensions
