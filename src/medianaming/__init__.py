"""Media-library naming core package.

Classifies path strings of a media library without touching the filesystem:

- **config**: Naming options (pattern tables, extension sets) loaded from YAML
- **tv**: Episode path parsing (season/episode/air date/series name)
- **video**: Extras, stubs, 3D flags, part stacking and per-directory grouping
- **summary_table**: Rich tables for inspecting grouped titles

The main entry points are ``EpisodeResolver`` and ``VideoListResolver``.
"""

from .config import NamingOptions, load_naming_options
from .models import EpisodeInfo, FileMetadata, VideoFileInfo, VideoInfo
from .paths import MalformedPathError
from .tv import EpisodeResolver
from .version import __version__
from .video import VideoListResolver, VideoResolver

__all__ = [
    "__version__",
    "EpisodeInfo",
    "EpisodeResolver",
    "FileMetadata",
    "MalformedPathError",
    "NamingOptions",
    "VideoFileInfo",
    "VideoInfo",
    "VideoListResolver",
    "VideoResolver",
    "load_naming_options",
]
