from __future__ import annotations

import logging
from typing import Optional

from ..config import NamingOptions
from ..media_types import is_video_file
from ..models import EpisodeInfo
from ..paths import extension, require_path
from ..regex_provider import RegexProvider
from ..video.flags import FlagParser, Format3DParser
from ..video.stub_parser import StubParser
from .episode_path_parser import EpisodePathParser

LOGGER = logging.getLogger(__name__)


class EpisodeResolver:
    """Builds an ``EpisodeInfo`` for a file or folder path."""

    def __init__(self, options: NamingOptions, regex_provider: Optional[RegexProvider] = None) -> None:
        self.options = options
        self._path_parser = EpisodePathParser(options, regex_provider)
        self._stub_parser = StubParser(options)
        self._flag_parser = FlagParser(options)
        self._format_3d_parser = Format3DParser(options)

    def parse_file(self, path: str) -> Optional[EpisodeInfo]:
        return self.resolve(path, is_folder=False)

    def parse_directory(self, path: str) -> Optional[EpisodeInfo]:
        return self.resolve(path, is_folder=True)

    def resolve(self, path: str, is_folder: bool = False, fill_extended_info: bool = True) -> Optional[EpisodeInfo]:
        """Resolve ``path`` or return None when it is neither a video nor a stub.

        Raises:
            MalformedPathError: If ``path`` is None or blank
        """
        require_path(path)

        is_stub = False
        stub_type: Optional[str] = None
        container: Optional[str] = None

        if not is_folder:
            if not is_video_file(path, self.options):
                stub_result = self._stub_parser.parse_file(path)
                if not stub_result.is_stub:
                    LOGGER.debug("Ignoring %s: not a video or stub file", path)
                    return None
                is_stub = True
                stub_type = stub_result.stub_type
            container = extension(path).lstrip(".") or None

        format_3d = self._format_3d_parser.parse(self._flag_parser.get_flags(path))
        parsed = self._path_parser.parse(path, is_folder, fill_extended_info)

        return EpisodeInfo(
            path=path,
            container=container,
            is_stub=is_stub,
            stub_type=stub_type,
            is_3d=format_3d.is_3d,
            format_3d=format_3d.format_3d,
            season_number=parsed.season_number,
            episode_number=parsed.episode_number,
            ending_episode_number=parsed.ending_episode_number,
            series_name=parsed.series_name,
            year=parsed.year,
            month=parsed.month,
            day=parsed.day,
            is_by_date=parsed.is_by_date,
            success=parsed.success,
        )
