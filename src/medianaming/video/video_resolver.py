"""Resolves one path into a ``VideoFileInfo`` (name, year, extra, stub and 3D details)."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import NamingOptions
from ..logging_utils import render_fields_block
from ..media_types import is_stub_file, is_video_file
from ..models import VideoFileInfo
from ..paths import extension, file_name, file_name_without_extension, require_path
from ..regex_provider import DEFAULT_REGEX_PROVIDER, RegexProvider
from .clean import clean_date_time, clean_string
from .extra_type_parser import ExtraTypeParser
from .flags import FlagParser, Format3DParser
from .stub_parser import StubParser

LOGGER = logging.getLogger(__name__)


class VideoResolver:
    """Turns a single path into a ``VideoFileInfo`` (or None when not media)."""

    def __init__(self, options: NamingOptions, regex_provider: Optional[RegexProvider] = None) -> None:
        self.options = options
        self.regex_provider = regex_provider or DEFAULT_REGEX_PROVIDER
        self._stub_parser = StubParser(options)
        self._flag_parser = FlagParser(options)
        self._format_3d_parser = Format3DParser(options)
        self._extra_parser = ExtraTypeParser(options)

    def resolve_file(self, path: str) -> Optional[VideoFileInfo]:
        return self.resolve(path, is_directory=False)

    def resolve_directory(self, path: str) -> Optional[VideoFileInfo]:
        return self.resolve(path, is_directory=True)

    def is_video_file(self, path: str) -> bool:
        return is_video_file(path, self.options)

    def is_stub_file(self, path: str) -> bool:
        return is_stub_file(path, self.options)

    def resolve(self, path: str, is_directory: bool = False, parse_name: bool = True) -> Optional[VideoFileInfo]:
        require_path(path)

        is_stub = False
        stub_type: Optional[str] = None
        container: Optional[str] = None

        if not is_directory:
            if not self.is_video_file(path):
                stub_result = self._stub_parser.parse_file(path)
                if not stub_result.is_stub:
                    LOGGER.debug("Ignoring %s: not a video or stub file", path)
                    return None
                is_stub = True
                stub_type = stub_result.stub_type
            container = extension(path).lstrip(".") or None

        format_3d = self._format_3d_parser.parse(self._flag_parser.get_flags(path))
        extra = self._extra_parser.get_extra_info(path)

        stem = file_name(path) if is_directory else file_name_without_extension(path)
        name = stem
        year: Optional[int] = None
        if parse_name:
            cleaned = clean_date_time(stem, self.options, self.regex_provider)
            if not extra.extra_type:
                _, name = clean_string(cleaned.name, self.options, self.regex_provider)
            year = cleaned.year

        info = VideoFileInfo(
            path=path,
            name=name,
            file_name_without_extension=stem,
            container=container,
            year=year,
            extra_type=extra.extra_type,
            extra_rule=extra.rule,
            is_stub=is_stub,
            stub_type=stub_type,
            is_3d=format_3d.is_3d,
            format_3d=format_3d.format_3d,
            is_directory=is_directory,
        )
        LOGGER.debug(
            render_fields_block(
                "Video File Resolved",
                {
                    "Path": path,
                    "Name": info.name,
                    "Year": info.year,
                    "Extra": info.extra_type,
                    "3D": info.format_3d,
                    "Stub": info.stub_type if info.is_stub else None,
                },
            )
        )
        return info
