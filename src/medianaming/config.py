from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

from .utils import load_yaml_file

# Episode expression kinds
KIND_BY_DATE = "by_date"
KIND_NAMED = "named"
KIND_POSITIONAL = "positional"
EPISODE_EXPRESSION_KINDS = frozenset({KIND_BY_DATE, KIND_NAMED, KIND_POSITIONAL})

# Extra rule gates and predicates
MEDIA_TYPE_AUDIO = "audio"
MEDIA_TYPE_VIDEO = "video"
MEDIA_TYPES = frozenset({MEDIA_TYPE_AUDIO, MEDIA_TYPE_VIDEO})
RULE_TYPE_FILENAME = "filename"
RULE_TYPE_SUFFIX = "suffix"
EXTRA_RULE_TYPES = frozenset({RULE_TYPE_FILENAME, RULE_TYPE_SUFFIX})

DEFAULT_PROFILE = "basic"
_OPTIONS_RESOURCE = "naming_options.yaml"


@dataclass(frozen=True)
class EpisodeExpression:
    regex: str
    kind: str = KIND_POSITIONAL  # by_date | named | positional
    date_formats: tuple[str, ...] = ()
    roman_numerals: bool = False
    description: str | None = None

    @property
    def is_by_date(self) -> bool:
        return self.kind == KIND_BY_DATE

    @property
    def is_named(self) -> bool:
        return self.kind == KIND_NAMED


@dataclass(frozen=True)
class ExtraRule:
    extra_type: str
    rule_type: str  # filename | suffix
    token: str
    media_type: str = MEDIA_TYPE_VIDEO  # audio | video


@dataclass(frozen=True)
class StubTypeRule:
    token: str
    stub_type: str


@dataclass(frozen=True)
class Format3DRule:
    token: str
    preceding_token: str | None = None


@dataclass
class NamingOptions:
    """Pattern tables and extension sets driving every resolver.

    All rule lists are ordered; earlier entries take priority. Build one with
    ``load_naming_options`` (or ``NamingOptions.basic()`` /
    ``NamingOptions.extended()``) or construct it directly in code.
    """

    video_file_extensions: list[str] = field(default_factory=list)
    audio_file_extensions: list[str] = field(default_factory=list)
    stub_file_extensions: list[str] = field(default_factory=list)
    stub_types: list[StubTypeRule] = field(default_factory=list)
    video_flag_delimiters: list[str] = field(default_factory=list)
    format_3d_rules: list[Format3DRule] = field(default_factory=list)
    stacking_expressions: list[str] = field(default_factory=list)
    clean_date_times: list[str] = field(default_factory=list)
    clean_strings: list[str] = field(default_factory=list)
    episode_expressions: list[EpisodeExpression] = field(default_factory=list)
    extra_rules: list[ExtraRule] = field(default_factory=list)
    # When true a by-date expression only succeeds if its text parsed as a date.
    require_parsed_date: bool = False

    @classmethod
    def basic(cls) -> "NamingOptions":
        return load_naming_options("basic")

    @classmethod
    def extended(cls) -> "NamingOptions":
        return load_naming_options("extended")


def _ensure_list(value: Any, *, field_name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' must be provided as a list")
    return value


def _ensure_mapping(value: Any, *, field_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"'{field_name}' entries must be mappings, got {value!r}")
    return value


def _validate_regex(regex: str, *, field_name: str) -> str:
    try:
        re.compile(regex, re.IGNORECASE)
    except re.error as exc:
        raise ValueError(f"'{field_name}' is not a valid regular expression: {exc}") from exc
    return regex


def _normalize_extensions(value: Any, *, field_name: str) -> list[str]:
    extensions: list[str] = []
    for index, entry in enumerate(_ensure_list(value, field_name=field_name)):
        text = str(entry).strip().lower()
        if not text:
            raise ValueError(f"'{field_name}[{index}]' must not be empty")
        extensions.append(text if text.startswith(".") else f".{text}")
    return extensions


def _build_episode_expression(data: dict[str, Any], *, field_name: str) -> EpisodeExpression:
    data = _ensure_mapping(data, field_name=field_name)
    if "regex" not in data:
        raise ValueError(f"'{field_name}' is missing required 'regex' field")
    kind = str(data.get("kind", KIND_POSITIONAL)).strip().lower()
    if kind not in EPISODE_EXPRESSION_KINDS:
        allowed = ", ".join(sorted(EPISODE_EXPRESSION_KINDS))
        raise ValueError(f"'{field_name}.kind' must be one of {allowed}, got '{kind}'")
    formats = _ensure_list(data.get("date_formats"), field_name=f"{field_name}.date_formats")
    return EpisodeExpression(
        regex=_validate_regex(str(data["regex"]), field_name=f"{field_name}.regex"),
        kind=kind,
        date_formats=tuple(str(fmt) for fmt in formats),
        roman_numerals=bool(data.get("roman_numerals", False)),
        description=data.get("description"),
    )


def _build_extra_rule(data: dict[str, Any], *, field_name: str) -> ExtraRule:
    data = _ensure_mapping(data, field_name=field_name)
    media_type = str(data.get("media_type", MEDIA_TYPE_VIDEO)).strip().lower()
    if media_type not in MEDIA_TYPES:
        raise ValueError(f"'{field_name}.media_type' must be audio or video, got '{media_type}'")
    rule_type = str(data.get("rule_type", "")).strip().lower()
    if rule_type not in EXTRA_RULE_TYPES:
        raise ValueError(f"'{field_name}.rule_type' must be filename or suffix, got '{rule_type}'")
    token = data.get("token")
    extra_type = data.get("extra_type")
    if not token or not extra_type:
        raise ValueError(f"'{field_name}' requires both 'token' and 'extra_type'")
    return ExtraRule(
        extra_type=str(extra_type),
        rule_type=rule_type,
        token=str(token),
        media_type=media_type,
    )


def _build_stub_type_rule(data: dict[str, Any], *, field_name: str) -> StubTypeRule:
    data = _ensure_mapping(data, field_name=field_name)
    if not data.get("token") or not data.get("stub_type"):
        raise ValueError(f"'{field_name}' requires both 'token' and 'stub_type'")
    return StubTypeRule(token=str(data["token"]), stub_type=str(data["stub_type"]))


def _build_format_3d_rule(data: dict[str, Any], *, field_name: str) -> Format3DRule:
    data = _ensure_mapping(data, field_name=field_name)
    if not data.get("token"):
        raise ValueError(f"'{field_name}' is missing required 'token' field")
    preceding = data.get("preceding_token")
    return Format3DRule(
        token=str(data["token"]),
        preceding_token=str(preceding) if preceding else None,
    )


def _build_regex_list(value: Any, *, field_name: str) -> list[str]:
    return [
        _validate_regex(str(entry), field_name=f"{field_name}[{index}]")
        for index, entry in enumerate(_ensure_list(value, field_name=field_name))
    ]


def _merge_profile(defaults: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Overlay a profile on the defaults; lists are appended, scalars replaced."""
    merged = dict(defaults)
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(value, list) and isinstance(existing, list):
            merged[key] = existing + value
        else:
            merged[key] = value
    return merged


def build_naming_options(data: dict[str, Any]) -> NamingOptions:
    """Build ``NamingOptions`` from a single flattened mapping."""
    return NamingOptions(
        video_file_extensions=_normalize_extensions(
            data.get("video_file_extensions"), field_name="video_file_extensions"
        ),
        audio_file_extensions=_normalize_extensions(
            data.get("audio_file_extensions"), field_name="audio_file_extensions"
        ),
        stub_file_extensions=_normalize_extensions(
            data.get("stub_file_extensions"), field_name="stub_file_extensions"
        ),
        stub_types=[
            _build_stub_type_rule(entry, field_name=f"stub_types[{index}]")
            for index, entry in enumerate(_ensure_list(data.get("stub_types"), field_name="stub_types"))
        ],
        video_flag_delimiters=[
            str(entry)
            for entry in _ensure_list(data.get("video_flag_delimiters"), field_name="video_flag_delimiters")
            if str(entry)
        ],
        format_3d_rules=[
            _build_format_3d_rule(entry, field_name=f"format_3d_rules[{index}]")
            for index, entry in enumerate(_ensure_list(data.get("format_3d_rules"), field_name="format_3d_rules"))
        ],
        stacking_expressions=_build_regex_list(data.get("stacking_expressions"), field_name="stacking_expressions"),
        clean_date_times=_build_regex_list(data.get("clean_date_times"), field_name="clean_date_times"),
        clean_strings=_build_regex_list(data.get("clean_strings"), field_name="clean_strings"),
        episode_expressions=[
            _build_episode_expression(entry, field_name=f"episode_expressions[{index}]")
            for index, entry in enumerate(
                _ensure_list(data.get("episode_expressions"), field_name="episode_expressions")
            )
        ],
        extra_rules=[
            _build_extra_rule(entry, field_name=f"extra_rules[{index}]")
            for index, entry in enumerate(_ensure_list(data.get("extra_rules"), field_name="extra_rules"))
        ],
        require_parsed_date=bool(data.get("require_parsed_date", False)),
    )


@lru_cache
def _load_builtin_data() -> dict[str, Any]:
    with resources.as_file(resources.files(__package__) / _OPTIONS_RESOURCE) as path:
        return load_yaml_file(path)


def _resolve_profile(data: dict[str, Any], profile: str) -> dict[str, Any]:
    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("'defaults' must be a mapping of naming options")
    if profile == DEFAULT_PROFILE:
        return defaults

    profiles = data.get("profiles") or {}
    if not isinstance(profiles, dict):
        raise ValueError("'profiles' must be a mapping of profile name -> overrides")
    if profile not in profiles:
        known = ", ".join(sorted({DEFAULT_PROFILE, *profiles}))
        raise ValueError(f"Unknown naming profile '{profile}' (known: {known})")
    overlay = profiles[profile] or {}
    if not isinstance(overlay, dict):
        raise ValueError(f"Profile '{profile}' must be a mapping of naming options")
    return _merge_profile(defaults, overlay)


def load_naming_options(profile: str = DEFAULT_PROFILE, path: Path | None = None) -> NamingOptions:
    """Load naming options for ``profile``.

    Args:
        profile: ``basic`` for the defaults, or the name of an entry under
            ``profiles`` (``extended`` ships with the package)
        path: Optional YAML file with the same layout as the bundled
            ``naming_options.yaml``

    Returns:
        A freshly built NamingOptions instance the caller owns
    """
    data = load_yaml_file(path) if path is not None else _load_builtin_data()
    return build_naming_options(_resolve_profile(data, profile))
