from __future__ import annotations

import pytest

from medianaming.config import RULE_TYPE_FILENAME, RULE_TYPE_SUFFIX, ExtraRule, NamingOptions
from medianaming.video.extra_type_parser import ExtraTypeParser


@pytest.fixture(scope="module")
def basic_parser() -> ExtraTypeParser:
    return ExtraTypeParser(NamingOptions.basic())


@pytest.fixture(scope="module")
def extended_parser() -> ExtraTypeParser:
    return ExtraTypeParser(NamingOptions.extended())


class TestBasicExtras:
    """Trailers, theme songs and theme videos from the basic table."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/movies/300/trailer.mp4", "trailer"),
            ("/movies/300/Trailer.MP4", "trailer"),
            ("/movies/300/trailer.mp3", None),
            ("/movies/300/300-trailer.mp4", "trailer"),
            ("/movies/300/300.trailer.mkv", "trailer"),
            ("/movies/300/300 trailer.mkv", "trailer"),
            ("/movies/300/theme.mp3", "themesong"),
            ("/movies/300/theme.mkv", None),
            ("/movies/300/backdrop.mp4", "themevideo"),
            ("/movies/300/300-sample.mp4", None),
            ("/movies/300/300.mkv", None),
        ],
    )
    def test_basic_extra_types(self, basic_parser: ExtraTypeParser, path: str, expected) -> None:
        assert basic_parser.get_extra_info(path).extra_type == expected

    def test_result_carries_rule_and_token(self, basic_parser: ExtraTypeParser) -> None:
        result = basic_parser.get_extra_info("/movies/300/300-trailer.mp4")

        assert result.rule is not None
        assert result.rule.rule_type == RULE_TYPE_SUFFIX
        assert result.tokens == ["-trailer"]

    def test_no_match_is_empty(self, basic_parser: ExtraTypeParser) -> None:
        result = basic_parser.get_extra_info("/movies/300/300.mkv")

        assert result.extra_type is None
        assert result.tokens == []
        assert result.rule is None


class TestExtendedExtras:
    """The extended profile appends samples, scenes and featurettes."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/movies/300/300-sample.mp4", "sample"),
            ("/movies/300/sample.mkv", "sample"),
            ("/movies/300/300-deleted.mp4", "deletedscene"),
            ("/movies/300/300-featurette.mkv", "featurette"),
            ("/movies/300/300-behindthescenes.mkv", "behindthescenes"),
            ("/movies/300/300-interview.mkv", "interview"),
            ("/movies/300/300-trailer.mp4", "trailer"),
            ("/movies/300/theme.mp3", "themesong"),
        ],
    )
    def test_extended_extra_types(self, extended_parser: ExtraTypeParser, path: str, expected: str) -> None:
        assert extended_parser.get_extra_info(path).extra_type == expected


class TestRuleOrder:
    def test_first_matching_rule_wins(self) -> None:
        options = NamingOptions(
            video_file_extensions=[".mkv"],
            extra_rules=[
                ExtraRule(extra_type="clip", rule_type=RULE_TYPE_SUFFIX, token="-clip"),
                ExtraRule(extra_type="other", rule_type=RULE_TYPE_SUFFIX, token="clip"),
                ExtraRule(extra_type="named", rule_type=RULE_TYPE_FILENAME, token="movie-clip"),
            ],
        )

        assert ExtraTypeParser(options).get_extra_info("/m/Movie-Clip.mkv").extra_type == "clip"
