from __future__ import annotations

import pytest

from medianaming.config import RULE_TYPE_FILENAME, NamingOptions
from medianaming.paths import MalformedPathError
from medianaming.video.video_resolver import VideoResolver


@pytest.fixture(scope="module")
def resolver() -> VideoResolver:
    return VideoResolver(NamingOptions.basic())


class TestVideoResolver:
    def test_blank_path_raises(self, resolver: VideoResolver) -> None:
        with pytest.raises(MalformedPathError):
            resolver.resolve_file(" ")

    def test_non_media_returns_none(self, resolver: VideoResolver) -> None:
        assert resolver.resolve_file("/movies/Tron/notes.txt") is None

    def test_name_and_year(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_file("/movies/Tron Legacy (2010)/Tron Legacy (2010).mkv")

        assert info is not None
        assert info.name == "Tron Legacy"
        assert info.year == 2010
        assert info.container == "mkv"
        assert info.file_name_without_extension == "Tron Legacy (2010)"
        assert info.extra_type is None

    def test_release_tokens_are_cleaned(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_file("/movies/X-Men Days of Future Past/X-Men Days of Future Past - 1080p.mkv")

        assert info is not None
        assert info.name == "X-Men Days of Future Past -"

    def test_extras_keep_raw_name(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_file("/movies/Tron Legacy (2010)/trailer.mp4")

        assert info is not None
        assert info.extra_type == "trailer"
        assert info.extra_rule is not None
        assert info.extra_rule.rule_type == RULE_TYPE_FILENAME
        assert info.name == "trailer"

    def test_parse_name_disabled(self, resolver: VideoResolver) -> None:
        info = resolver.resolve("/movies/Tron Legacy (2010).mkv", parse_name=False)

        assert info is not None
        assert info.name == "Tron Legacy (2010)"
        assert info.year is None

    def test_stub(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_file("/movies/Tron Legacy (2010).bluray.disc")

        assert info is not None
        assert info.is_stub is True
        assert info.stub_type == "bluray"
        assert info.container == "disc"

    def test_3d_file(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_file("/movies/Avatar (2009)/Avatar (2009).3d.hsbs.mkv")

        assert info is not None
        assert info.is_3d is True
        assert info.format_3d == "hsbs"
        assert info.year == 2009

    def test_directory(self, resolver: VideoResolver) -> None:
        info = resolver.resolve_directory("/movies/Tron Legacy (2010)")

        assert info is not None
        assert info.is_directory is True
        assert info.container is None
        assert info.name == "Tron Legacy"
        assert info.file_name_without_extension == "Tron Legacy (2010)"

    def test_media_type_helpers(self, resolver: VideoResolver) -> None:
        assert resolver.is_video_file("/movies/a.MKV") is True
        assert resolver.is_video_file("/movies/a.mp3") is False
        assert resolver.is_stub_file("/movies/a.dvd.disc") is True
