from __future__ import annotations

import pytest

from medianaming.config import NamingOptions
from medianaming.models import EpisodeInfo
from medianaming.paths import MalformedPathError
from medianaming.tv.episode_resolver import EpisodeResolver


@pytest.fixture(scope="module")
def resolver() -> EpisodeResolver:
    return EpisodeResolver(NamingOptions.basic())


class TestEpisodeResolver:
    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_blank_path_raises(self, resolver: EpisodeResolver, path) -> None:
        with pytest.raises(MalformedPathError):
            resolver.resolve(path)

    def test_malformed_path_error_is_value_error(self, resolver: EpisodeResolver) -> None:
        with pytest.raises(ValueError):
            resolver.parse_file("")

    def test_non_media_file_returns_none(self, resolver: EpisodeResolver) -> None:
        assert resolver.resolve("/tv/Show/Season 1/Show - S01E02.nfo") is None

    def test_video_file(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_file("/tv/Show/Season 1/Show - S01E02.mkv")

        assert isinstance(info, EpisodeInfo)
        assert info.path == "/tv/Show/Season 1/Show - S01E02.mkv"
        assert info.container == "mkv"
        assert info.series_name == "Show"
        assert info.season_number == 1
        assert info.episode_number == 2
        assert info.is_stub is False
        assert info.success is True
        assert info.is_3d is False

    def test_stub_file(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_file("/tv/Show/Season 1/Show - S01E02.dvd.disc")

        assert info is not None
        assert info.is_stub is True
        assert info.stub_type == "dvd"
        assert info.container == "disc"
        assert info.episode_number == 2

    def test_3d_flags(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_file("/tv/Show/Show.S01E02.3d.sbs.mkv")

        assert info is not None
        assert info.is_3d is True
        assert info.format_3d == "sbs"

    def test_daily_episode(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_file(r"\\server\A Daily Show - (2015-01-15) - Episode Name - [720p].mkv")

        assert info is not None
        assert info.is_by_date is True
        assert (info.year, info.month, info.day) == (2015, 1, 15)
        assert info.season_number is None
        assert info.episode_number is None

    def test_directory_skips_extension_gate(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_directory("/tv/Show/01")

        assert info is not None
        assert info.container is None
        assert info.episode_number == 1

    def test_unmatched_video_still_resolves(self, resolver: EpisodeResolver) -> None:
        info = resolver.parse_file("/tv/Show/readme.mkv")

        assert info is not None
        assert info.episode_number is None
        assert info.season_number is None
        assert info.success is False
