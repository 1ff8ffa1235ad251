from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_ROMAN_PATTERN = re.compile(r"^[ivxlcdm]+$", re.IGNORECASE)
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer the invariant way, returning None instead of raising."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def roman_to_int(value: str) -> Optional[int]:
    """Convert a roman numeral (``II``, ``iv``) to an integer, or None."""
    text = value.strip()
    if not text or not _ROMAN_PATTERN.match(text):
        return None
    text = text.upper()
    result = 0
    index = 0
    while index < len(text):
        current = _ROMAN_VALUES[text[index]]
        following = _ROMAN_VALUES[text[index + 1]] if index + 1 < len(text) else 0
        if current < following:
            result += following - current
            index += 2
        else:
            result += current
            index += 1
    return result


def load_yaml_file(path: Path) -> Dict[str, Any]:
    # No environment expansion: pattern tables contain literal ``$`` anchors.
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return data
