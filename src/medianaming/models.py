from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .config import ExtraRule


@dataclass(slots=True, frozen=True)
class FileMetadata:
    """A caller-supplied ``{path, is_folder}`` descriptor."""

    path: str
    is_folder: bool = False


@dataclass(slots=True, frozen=True)
class EpisodePathParserResult:
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    ending_episode_number: Optional[int] = None
    series_name: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    is_by_date: bool = False
    success: bool = False


@dataclass(slots=True, frozen=True)
class EpisodeInfo:
    path: str
    container: Optional[str] = None
    is_stub: bool = False
    stub_type: Optional[str] = None
    is_3d: bool = False
    format_3d: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    ending_episode_number: Optional[int] = None
    series_name: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    is_by_date: bool = False
    success: bool = False


@dataclass(slots=True)
class ExtraResult:
    extra_type: Optional[str] = None
    tokens: List[str] = field(default_factory=list)
    rule: Optional["ExtraRule"] = None


@dataclass(slots=True, frozen=True)
class StubResult:
    is_stub: bool = False
    stub_type: Optional[str] = None


@dataclass(slots=True)
class Format3DResult:
    is_3d: bool = False
    format_3d: Optional[str] = None
    tokens: List[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class CleanDateTimeResult:
    name: str
    year: Optional[int] = None


@dataclass(slots=True, frozen=True)
class VideoFileInfo:
    path: str
    name: str
    file_name_without_extension: str
    container: Optional[str] = None
    year: Optional[int] = None
    extra_type: Optional[str] = None
    extra_rule: Optional["ExtraRule"] = None
    is_stub: bool = False
    stub_type: Optional[str] = None
    is_3d: bool = False
    format_3d: Optional[str] = None
    is_directory: bool = False


@dataclass(slots=True)
class Stack:
    name: str = ""
    is_directory_stack: bool = False
    files: List[str] = field(default_factory=list)

    def contains_file(self, path: str, is_directory: bool) -> bool:
        if self.is_directory_stack != is_directory:
            return False
        return path in self.files


@dataclass(slots=True)
class StackResult:
    stacks: List[Stack] = field(default_factory=list)


@dataclass(slots=True)
class VideoInfo:
    name: str
    year: Optional[int] = None
    files: List[VideoFileInfo] = field(default_factory=list)
    extras: List[VideoFileInfo] = field(default_factory=list)
    alternate_versions: List[VideoFileInfo] = field(default_factory=list)

    @property
    def is_stacked(self) -> bool:
        return len(self.files) > 1
