"""Display-name cleaning for video files.

``clean_date_time`` splits ``The Wolf of Wall Street (2013)`` into a name and
a year; ``clean_string`` cuts a name at the first release token
(``Movie - 1080p`` -> ``Movie -``).
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..config import NamingOptions
from ..models import CleanDateTimeResult
from ..regex_provider import DEFAULT_REGEX_PROVIDER, RegexProvider
from ..utils import parse_int


def clean_date_time(
    name: str,
    options: NamingOptions,
    regex_provider: Optional[RegexProvider] = None,
) -> CleanDateTimeResult:
    provider = regex_provider or DEFAULT_REGEX_PROVIDER
    for expression in options.clean_date_times:
        match = provider.get_regex(expression, re.IGNORECASE).search(name)
        if match is None or match.re.groups < 2:
            continue
        year = parse_int(match.group(2))
        if year is None:
            continue
        return CleanDateTimeResult(name=match.group(1).strip(), year=year)
    return CleanDateTimeResult(name=name)


def clean_string(
    name: str,
    options: NamingOptions,
    regex_provider: Optional[RegexProvider] = None,
) -> Tuple[bool, str]:
    """Return ``(changed, cleaned_name)``."""
    provider = regex_provider or DEFAULT_REGEX_PROVIDER
    for expression in options.clean_strings:
        match = provider.get_regex(expression, re.IGNORECASE).search(name)
        if match is None:
            continue
        cleaned = name[: match.start()].strip()
        # A token at the very start ("[Group] Movie") would leave nothing.
        if cleaned:
            return True, cleaned
    return False, name
