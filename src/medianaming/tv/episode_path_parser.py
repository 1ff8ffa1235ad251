"""Rule-based extraction of season/episode/date/series name from a path.

Expressions are evaluated strictly in the configured order and the first one
producing a successful result wins; there is no scoring. A secondary pass
(``fill_additional``) then recovers a series name or a multi-episode ending
number that the winning expression could not provide.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..config import KIND_NAMED, EpisodeExpression, NamingOptions
from ..logging_utils import render_fields_block
from ..models import EpisodePathParserResult
from ..regex_provider import DEFAULT_REGEX_PROVIDER, RegexProvider
from ..utils import parse_int, roman_to_int

LOGGER = logging.getLogger(__name__)

FOLDER_SUFFIX = ".mp4"
SERIES_NAME_SEPARATORS = "_.-"

# Locale-free formats tried when an expression's own formats do not apply.
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y.%m.%d",
    "%Y/%m/%d",
    "%Y_%m_%d",
    "%Y %m %d",
    "%d-%m-%Y",
    "%d.%m.%Y",
    "%d/%m/%Y",
    "%d_%m_%Y",
    "%d %m %Y",
)

# Characters that, directly after an ending episode number, show the capture
# ran into something else: more digits (s09e14-1080p) or a resolution suffix
# (s09e14-720p, 1080i).
_ENDING_NUMBER_INVALID_FOLLOWERS = frozenset("0123456789pi")

MULTIPLE_EPISODE_EXPRESSIONS: tuple[EpisodeExpression, ...] = tuple(
    EpisodeExpression(regex=regex, kind=KIND_NAMED)
    for regex in (
        r".*(\\|\/)[sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3})((-| - )\d{1,4}[eExX](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)[sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3})((-| - )\d{1,4}[xX][eE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)[sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3})((-| - )?[xXeE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)[sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3})(-[xE]?[eE]?(?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>((?![sS]?\d{1,4}[xX]\d{1,3})[^\\\/])*)?([sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3}))((-| - )\d{1,4}[xXeE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>((?![sS]?\d{1,4}[xX]\d{1,3})[^\\\/])*)?([sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3}))((-| - )\d{1,4}[xX][eE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>((?![sS]?\d{1,4}[xX]\d{1,3})[^\\\/])*)?([sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3}))((-| - )?[xXeE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>((?![sS]?\d{1,4}[xX]\d{1,3})[^\\\/])*)?([sS]?(?P<seasonnumber>\d{1,4})[xX](?P<epnumber>\d{1,3}))(-[xX]?[eE]?(?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>[^\\\/]*)[sS](?P<seasonnumber>\d{1,4})[xX\.]?[eE](?P<epnumber>\d{1,3})((-| - )?[xXeE](?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
        r".*(\\|\/)(?P<seriesname>[^\\\/]*)[sS](?P<seasonnumber>\d{1,4})[xX\.]?[eE](?P<epnumber>\d{1,3})(-[xX]?[eE]?(?P<endingepnumber>\d{1,3}))+[^\\\/]*$",
    )
)


def parse_date(text: str, formats: Sequence[str] = ()) -> Optional[dt.date]:
    """Parse ``text`` with the given strptime formats, then the generic ones."""
    stripped = text.strip()
    if not stripped:
        return None
    for fmt in (*formats, *DATE_FORMATS):
        try:
            return dt.datetime.strptime(stripped, fmt).date()
        except ValueError:
            continue
    return None


def _parse_number(value: Optional[str], *, roman_numerals: bool) -> Optional[int]:
    number = parse_int(value)
    if number is None and roman_numerals and value:
        number = roman_to_int(value)
    return number


def _ending_number_is_valid(text: str, match: re.Match[str]) -> bool:
    end = match.end("endingepnumber")
    if end >= len(text):
        return True
    return text[end].lower() not in _ENDING_NUMBER_INVALID_FOLLOWERS


def clean_series_name(name: Optional[str]) -> Optional[str]:
    if name is None or not name.strip():
        return name
    return name.strip().strip(SERIES_NAME_SEPARATORS).strip()


def fill_additional(
    result: EpisodePathParserResult,
    candidates: Iterable[EpisodePathParserResult],
) -> EpisodePathParserResult:
    """Fold successful secondary results into ``result``.

    Fills the series name and the ending episode number while they are
    missing, stopping once the series name is known and either the episode
    number is unknown or the ending number has been found. Returns a new
    value; ``result`` is left untouched.
    """
    filled = result
    for candidate in candidates:
        if not candidate.success:
            continue
        if not (filled.series_name and filled.series_name.strip()):
            filled = replace(filled, series_name=candidate.series_name)
        if filled.ending_episode_number is None and filled.episode_number is not None:
            filled = replace(filled, ending_episode_number=candidate.ending_episode_number)
        if filled.series_name and filled.series_name.strip():
            if filled.episode_number is None or filled.ending_episode_number is not None:
                break
    return filled


class EpisodePathParser:
    def __init__(self, options: NamingOptions, regex_provider: Optional[RegexProvider] = None) -> None:
        self.options = options
        self.regex_provider = regex_provider or DEFAULT_REGEX_PROVIDER

    def parse(self, path: str, is_folder: bool, fill_extended_info: bool = True) -> EpisodePathParserResult:
        if is_folder:
            path += FOLDER_SUFFIX

        result = self._first_success(path, self.options.episode_expressions)
        if result is None:
            LOGGER.debug(render_fields_block("No Episode Expression Matched", {"Path": path}))
            return EpisodePathParserResult()

        if fill_extended_info:
            result = fill_additional(result, self._secondary_results(path, result))
            result = replace(result, series_name=clean_series_name(result.series_name))

        LOGGER.debug(
            render_fields_block(
                "Episode Path Parsed",
                {
                    "Path": path,
                    "Series": result.series_name,
                    "Season": result.season_number,
                    "Episode": result.episode_number,
                    "Ending Episode": result.ending_episode_number,
                    "By Date": result.is_by_date,
                },
            )
        )
        return result

    def _first_success(
        self, path: str, expressions: Iterable[EpisodeExpression]
    ) -> Optional[EpisodePathParserResult]:
        for expression in expressions:
            candidate = self.parse_expression(path, expression)
            if candidate.success:
                return candidate
        return None

    def _secondary_results(
        self, path: str, result: EpisodePathParserResult
    ) -> Iterable[EpisodePathParserResult]:
        expressions: list[EpisodeExpression] = []
        if not (result.series_name and result.series_name.strip()):
            expressions.extend(expr for expr in self.options.episode_expressions if expr.is_named)
        expressions.extend(MULTIPLE_EPISODE_EXPRESSIONS)
        # Lazily evaluated so the fold can stop before matching the rest.
        return (self.parse_expression(path, expression) for expression in expressions)

    def parse_expression(self, name: str, expression: EpisodeExpression) -> EpisodePathParserResult:
        """Apply a single expression to ``name``; never raises."""
        regex = self.regex_provider.get_regex(expression.regex, re.IGNORECASE)
        # (Full)(Season)(Episode)(Extension)
        if regex.groups < 2:
            return EpisodePathParserResult()
        match = regex.search(name)
        if match is None:
            return EpisodePathParserResult()

        if expression.is_by_date:
            return self._parse_by_date(match, expression)
        if expression.is_named:
            return self._parse_named(name, match, expression)
        return self._parse_positional(match, expression)

    def _parse_by_date(self, match: re.Match[str], expression: EpisodeExpression) -> EpisodePathParserResult:
        parsed = parse_date(match.group(0), expression.date_formats)
        success = parsed is not None or not self.options.require_parsed_date
        if parsed is None:
            return EpisodePathParserResult(is_by_date=True, success=success)
        return EpisodePathParserResult(
            year=parsed.year,
            month=parsed.month,
            day=parsed.day,
            is_by_date=True,
            success=success,
        )

    def _parse_named(
        self, name: str, match: re.Match[str], expression: EpisodeExpression
    ) -> EpisodePathParserResult:
        groups = match.groupdict()
        season = _parse_number(groups.get("seasonnumber"), roman_numerals=expression.roman_numerals)
        episode = _parse_number(groups.get("epnumber"), roman_numerals=expression.roman_numerals)

        ending: Optional[int] = None
        if groups.get("endingepnumber") is not None and _ending_number_is_valid(name, match):
            ending = parse_int(groups["endingepnumber"])

        return EpisodePathParserResult(
            season_number=season,
            episode_number=episode,
            ending_episode_number=ending,
            series_name=groups.get("seriesname"),
            success=episode is not None,
        )

    def _parse_positional(self, match: re.Match[str], expression: EpisodeExpression) -> EpisodePathParserResult:
        season = _parse_number(match.group(1), roman_numerals=expression.roman_numerals)
        episode = _parse_number(match.group(2), roman_numerals=expression.roman_numerals)
        return EpisodePathParserResult(
            season_number=season,
            episode_number=episode,
            success=episode is not None,
        )
