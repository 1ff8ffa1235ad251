"""Bracket-token ("flag") extraction and 3D format detection."""

from __future__ import annotations

import re
from typing import List, Sequence

from ..config import NamingOptions
from ..models import Format3DResult
from ..paths import file_name


class FlagParser:
    def __init__(self, options: NamingOptions) -> None:
        self.options = options

    def get_flags(self, path: str) -> List[str]:
        """Split the file name on the configured delimiters, dropping empties.

        ``Movie - [hsbs].mkv`` -> ``["Movie ", " ", "hsbs", "mkv"]``
        """
        delimiters = self.options.video_flag_delimiters
        if not delimiters:
            return [file_name(path)] if file_name(path) else []
        splitter = "[" + "".join(re.escape(delimiter) for delimiter in delimiters) + "]"
        return [token for token in re.split(splitter, file_name(path)) if token]


class Format3DParser:
    def __init__(self, options: NamingOptions) -> None:
        self.options = options

    def parse(self, flags: Sequence[str]) -> Format3DResult:
        lowered = [flag.lower() for flag in flags]
        for rule in self.options.format_3d_rules:
            token = rule.token.lower()
            if rule.preceding_token:
                preceding = rule.preceding_token.lower()
                matched = any(
                    current == preceding and following == token
                    for current, following in zip(lowered, lowered[1:])
                )
                tokens = [rule.preceding_token, rule.token]
            else:
                matched = token in lowered
                tokens = [rule.token]
            if matched:
                return Format3DResult(is_3d=True, format_3d=rule.token, tokens=tokens)
        return Format3DResult()

    def parse_path(self, path: str) -> Format3DResult:
        return self.parse(FlagParser(self.options).get_flags(path))
