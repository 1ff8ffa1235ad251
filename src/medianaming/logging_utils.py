"""Multi-line log blocks used for DEBUG output of the resolvers.

A block is a title, an underline and either aligned ``label: value`` rows or
bulleted sections::

    Episode Path Parsed
    -------------------
        Path    : /tv/Show/Show - S01E02.mkv
        Season  : 1
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover
    from .models import VideoFileInfo, VideoInfo

INDENT = "    "
MIN_LABEL_WIDTH = 8
MAX_LABEL_WIDTH = 22

FieldMapping = Union[Mapping[str, object], Sequence[tuple[str, object]]]


def _stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(_stringify(item) for item in value)
    return str(value)


def _header(title: str, pad_top: bool) -> list[str]:
    lines = [""] if pad_top else []
    lines.extend([title, "-" * len(title)])
    return lines


def render_fields_block(title: str, fields: FieldMapping, *, pad_top: bool = True) -> str:
    items = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
    lines = _header(title, pad_top)
    if items:
        width = max(len(str(key)) for key, _ in items)
        width = min(max(width, MIN_LABEL_WIDTH), MAX_LABEL_WIDTH)
        for key, value in items:
            lines.append(f"{INDENT}{str(key):<{width}}: {_stringify(value)}")
    return "\n".join(lines).rstrip()


def render_section_block(
    title: str,
    sections: Sequence[tuple[str, Iterable[str]]],
    *,
    pad_top: bool = True,
    empty_label: str = "(none)",
) -> str:
    lines = _header(title, pad_top)
    for heading, items in sections:
        if lines[-1] != "":
            lines.append("")
        lines.append(f"{heading}:")
        entries = [_stringify(item) for item in items if item is not None]
        if not entries:
            lines.append(f"{INDENT}{empty_label}")
            continue
        lines.extend(f"{INDENT}- {entry}" for entry in entries)
    return "\n".join(lines).rstrip()


def _file_label(info: "VideoFileInfo") -> str:
    label = info.path
    if info.extra_type:
        label += f" [{info.extra_type}]"
    if info.is_3d:
        label += f" [3d:{info.format_3d}]"
    return label


def render_video_info_block(video: "VideoInfo", *, pad_top: bool = True) -> str:
    title = video.name if video.year is None else f"{video.name} ({video.year})"
    return render_section_block(
        f"Title: {title}",
        [
            ("Files", [_file_label(item) for item in video.files]),
            ("Extras", [_file_label(item) for item in video.extras]),
            ("Alternate Versions", [_file_label(item) for item in video.alternate_versions]),
        ],
        pad_top=pad_top,
    )
