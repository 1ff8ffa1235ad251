from __future__ import annotations

import pytest

from medianaming.config import NamingOptions
from medianaming.video.stub_parser import StubParser


@pytest.fixture(scope="module")
def parser() -> StubParser:
    return StubParser(NamingOptions.basic())


class TestStubParser:
    @pytest.mark.parametrize(
        "path, stub_type",
        [
            ("/movies/Movie/Movie.dvd.disc", "dvd"),
            ("/movies/Movie/Movie.DVD.disc", "dvd"),
            ("/movies/Movie/Movie.brrip.disc", "bluray"),
            ("/movies/Movie/Movie.bd50.disc", "bluray"),
            ("/movies/Movie/Movie.hdtv.disc", "tv"),
            ("/movies/Movie/Movie.vhs.disc", "vhs"),
        ],
    )
    def test_known_stub_types(self, parser: StubParser, path: str, stub_type: str) -> None:
        result = parser.parse_file(path)

        assert result.is_stub is True
        assert result.stub_type == stub_type

    def test_unknown_token_is_untyped_stub(self, parser: StubParser) -> None:
        result = parser.parse_file("/movies/Movie/Movie.laserdisc.disc")

        assert result.is_stub is True
        assert result.stub_type is None

    def test_stub_without_inner_extension(self, parser: StubParser) -> None:
        result = parser.parse_file("/movies/Movie/Movie.disc")

        assert result.is_stub is True
        assert result.stub_type is None

    @pytest.mark.parametrize("path", ["/movies/Movie/Movie.dvd.mkv", "/movies/Movie/Movie"])
    def test_non_stub_files(self, parser: StubParser, path: str) -> None:
        result = parser.parse_file(path)

        assert result.is_stub is False
        assert result.stub_type is None
