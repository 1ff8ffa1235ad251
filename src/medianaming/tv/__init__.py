"""TV episode naming: path parsing and episode resolution."""

from .episode_path_parser import EpisodePathParser, fill_additional
from .episode_resolver import EpisodeResolver

__all__ = ["EpisodePathParser", "EpisodeResolver", "fill_additional"]
