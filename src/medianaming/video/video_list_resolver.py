"""Groups the video files of one directory into titles.

A title (``VideoInfo``) owns its primary file(s), the extras whose file names
start with one of its base names and, when multi-version support is enabled,
the alternate versions sharing its name::

    Movie - 1080p.mkv       -> "Movie -" (primary)
    Movie - [hsbs].mkv      -> "Movie -" (alternate version, 3D)
    Movie-trailer.mp4       -> "Movie -" (extra: trailer)
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..config import RULE_TYPE_FILENAME, NamingOptions
from ..logging_utils import render_video_info_block
from ..models import FileMetadata, VideoFileInfo, VideoInfo
from ..paths import parent_name
from ..regex_provider import RegexProvider
from .stack_resolver import StackResolver
from .video_resolver import VideoResolver

LOGGER = logging.getLogger(__name__)


class VideoListResolver:
    def __init__(self, options: NamingOptions, regex_provider: Optional[RegexProvider] = None) -> None:
        self.options = options
        self._video_resolver = VideoResolver(options, regex_provider)
        self._stack_resolver = StackResolver(options, regex_provider)

    def resolve(self, files: Iterable[FileMetadata], support_multi_version: bool = True) -> List[VideoInfo]:
        """Group ``files`` into titles.

        Files that are neither videos nor stubs are dropped; every other file
        ends up in exactly one title as a primary file, an extra or an
        alternate version. The result does not depend on the input order.
        """
        resolved = [
            info
            for info in (
                self._video_resolver.resolve(item.path, is_directory=item.is_folder)
                for item in sorted(files, key=lambda item: (item.path, item.is_folder))
            )
            if info is not None
        ]
        by_path = {(info.path, info.is_directory): info for info in resolved}

        # Extras are left out of stacking so a trailer cannot break a cd1/cd2 run.
        non_extras = [FileMetadata(info.path, info.is_directory) for info in resolved if not info.extra_type]
        stacks = self._stack_resolver.resolve(non_extras).stacks

        remaining = [
            info
            for info in resolved
            if not any(stack.contains_file(info.path, info.is_directory) for stack in stacks)
        ]

        videos: List[VideoInfo] = []

        for stack in stacks:
            stack_files = [by_path[(path, stack.is_directory_stack)] for path in stack.files]
            video = VideoInfo(name=stack.name, year=stack_files[0].year, files=stack_files)
            extras = self._get_extras(remaining, [stack.name, stack_files[0].file_name_without_extension])
            remaining = _without(remaining, extras)
            video.extras = extras
            videos.append(video)

        for media in [info for info in remaining if not info.extra_type]:
            video = VideoInfo(name=media.name, year=media.year, files=[media])
            extras = self._get_extras(remaining, [media.file_name_without_extension, media.name])
            remaining = _without(remaining, [*extras, media])
            video.extras = extras
            videos.append(video)

        if len(videos) == 1:
            video = videos[0]
            folder_name = parent_name(video.files[0].path)
            if folder_name.strip():
                extras = self._get_extras(remaining, [folder_name])
                remaining = _without(remaining, extras)
                video.extras.extend(extras)

            by_file_name = [
                info
                for info in remaining
                if info.extra_rule is not None and info.extra_rule.rule_type == RULE_TYPE_FILENAME
            ]
            remaining = _without(remaining, by_file_name)
            video.extras.extend(by_file_name)

        videos.extend(VideoInfo(name=info.name, year=info.year, files=[info]) for info in remaining)

        videos.sort(key=lambda video: (video.name.lower(), video.name, video.files[0].path))
        if support_multi_version:
            videos = _group_by_version(videos)

        for video in videos:
            LOGGER.debug(render_video_info_block(video))
        return videos

    def _get_extras(self, remaining: Sequence[VideoFileInfo], base_names: Sequence[str]) -> List[VideoFileInfo]:
        """Return the extras in ``remaining`` whose stem starts with a base name."""
        delimiters = "".join(self.options.video_flag_delimiters)
        candidates = list(base_names)
        candidates.extend(name.rstrip().rstrip(delimiters).rstrip() for name in base_names)
        prefixes = [name.lower() for name in candidates if name]
        return [
            info
            for info in remaining
            if info.extra_type
            and any(info.file_name_without_extension.lower().startswith(prefix) for prefix in prefixes)
        ]


def _without(items: Sequence[VideoFileInfo], removed: Sequence[VideoFileInfo]) -> List[VideoFileInfo]:
    removed_ids = {id(item) for item in removed}
    return [item for item in items if id(item) not in removed_ids]


def _group_by_version(videos: Sequence[VideoInfo]) -> List[VideoInfo]:
    grouped: List[VideoInfo] = []
    for video in videos:
        primary = None
        if len(video.files) == 1:
            name = video.name.lower()
            primary = next(
                (kept for kept in grouped if len(kept.files) == 1 and kept.name.lower() == name),
                None,
            )
        if primary is None:
            grouped.append(video)
            continue
        primary.alternate_versions.append(video.files[0])
        primary.extras.extend(video.extras)
    return grouped
