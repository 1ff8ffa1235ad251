from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from .models import VideoFileInfo, VideoInfo

# Color constants for row styling
TITLE_COLOR = "cyan"
EXTRA_COLOR = "yellow"
ALTERNATE_COLOR = "magenta"
DIM_COLOR = "dim"

STACK_SYMBOL = "≡"
STUB_SYMBOL = "○"


class SummaryTableRenderer:
    """Renders grouped titles as Rich Tables for diagnostics."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    @staticmethod
    def _colorize_count(value: int, color: str) -> str:
        if value == 0:
            return f"[{DIM_COLOR}]{value}[/{DIM_COLOR}]"
        return f"[{color}]{value}[/{color}]"

    @staticmethod
    def _flags(video: VideoInfo) -> str:
        flags = []
        if video.is_stacked:
            flags.append(STACK_SYMBOL)
        if any(item.is_stub for item in video.files):
            flags.append(STUB_SYMBOL)
        versions = (*video.files, *video.alternate_versions)
        formats = sorted({item.format_3d for item in versions if item.is_3d and item.format_3d})
        flags.extend(formats)
        return " ".join(flags)

    def render_titles_table(self, videos: Sequence[VideoInfo], *, title: str = "Resolved Titles") -> Table:
        """Render one row per title with its file, extra and alternate counts.

        Args:
            videos: Titles returned by ``VideoListResolver.resolve``
            title: Table caption

        Returns:
            Rich Table instance ready to print
        """
        table = Table(title=title, show_header=True, header_style="bold")

        table.add_column("Title", style=TITLE_COLOR)
        table.add_column("Year", justify="right")
        table.add_column("Files", justify="right")
        table.add_column("Extras", justify="right")
        table.add_column("Versions", justify="right")
        table.add_column("Flags", justify="center")

        for video in videos:
            table.add_row(
                video.name,
                str(video.year) if video.year is not None else f"[{DIM_COLOR}]-[/{DIM_COLOR}]",
                str(len(video.files)),
                self._colorize_count(len(video.extras), EXTRA_COLOR),
                self._colorize_count(len(video.alternate_versions), ALTERNATE_COLOR),
                self._flags(video),
            )
        return table

    def print_titles_table(self, videos: Sequence[VideoInfo], *, title: str = "Resolved Titles") -> None:
        self.console.print()
        self.console.print(self.render_titles_table(videos, title=title))

    @staticmethod
    def render_titles_plain_text(videos: Sequence[VideoInfo]) -> str:
        """Render the same information without Rich formatting."""

        def describe(item: VideoFileInfo) -> str:
            label = item.path
            if item.extra_type:
                label += f" ({item.extra_type})"
            return label

        lines = ["", "Resolved Titles", "---------------"]
        for video in videos:
            heading = video.name if video.year is None else f"{video.name} ({video.year})"
            lines.append(f"    {heading}")
            lines.extend(f"        file      : {describe(item)}" for item in video.files)
            lines.extend(f"        extra     : {describe(item)}" for item in video.extras)
            lines.extend(f"        alternate : {describe(item)}" for item in video.alternate_versions)
        return "\n".join(lines)
