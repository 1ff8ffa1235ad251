"""Movie/video naming: per-file classification and per-directory grouping."""

from .extra_type_parser import ExtraTypeParser
from .flags import FlagParser, Format3DParser
from .stack_resolver import StackResolver
from .stub_parser import StubParser
from .video_list_resolver import VideoListResolver
from .video_resolver import VideoResolver

__all__ = [
    "ExtraTypeParser",
    "FlagParser",
    "Format3DParser",
    "StackResolver",
    "StubParser",
    "VideoListResolver",
    "VideoResolver",
]
