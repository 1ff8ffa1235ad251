from __future__ import annotations

import io

import pytest
from rich.console import Console

from medianaming.models import VideoFileInfo, VideoInfo
from medianaming.summary_table import (
    ALTERNATE_COLOR,
    DIM_COLOR,
    EXTRA_COLOR,
    STACK_SYMBOL,
    STUB_SYMBOL,
    SummaryTableRenderer,
)


def _file(path: str, **kwargs) -> VideoFileInfo:
    stem = path.rsplit("/", 1)[-1].rsplit(".", 1)[0]
    return VideoFileInfo(path=path, name=stem, file_name_without_extension=stem, **kwargs)


@pytest.fixture
def videos() -> list[VideoInfo]:
    return [
        VideoInfo(
            name="Movie",
            year=2010,
            files=[_file("/m/Movie cd1.avi"), _file("/m/Movie cd2.avi")],
            extras=[_file("/m/Movie-trailer.mp4", extra_type="trailer")],
        ),
        VideoInfo(
            name="Other",
            files=[_file("/m/Other.dvd.disc", is_stub=True, stub_type="dvd")],
            alternate_versions=[_file("/m/Other [hsbs].mkv", is_3d=True, format_3d="hsbs")],
        ),
    ]


class TestColorHelpers:
    """Test count coloring."""

    def test_zero_is_dim(self) -> None:
        assert SummaryTableRenderer._colorize_count(0, EXTRA_COLOR) == f"[{DIM_COLOR}]0[/{DIM_COLOR}]"

    def test_non_zero_uses_color(self) -> None:
        assert SummaryTableRenderer._colorize_count(2, ALTERNATE_COLOR) == f"[{ALTERNATE_COLOR}]2[/{ALTERNATE_COLOR}]"


class TestFlags:
    def test_stacked_title(self, videos: list[VideoInfo]) -> None:
        assert SummaryTableRenderer._flags(videos[0]) == STACK_SYMBOL

    def test_stub_and_3d_alternate(self, videos: list[VideoInfo]) -> None:
        assert SummaryTableRenderer._flags(videos[1]) == f"{STUB_SYMBOL} hsbs"


class TestRenderTitlesTable:
    def test_table_shape(self, videos: list[VideoInfo]) -> None:
        table = SummaryTableRenderer().render_titles_table(videos)

        assert table.title == "Resolved Titles"
        assert [column.header for column in table.columns] == ["Title", "Year", "Files", "Extras", "Versions", "Flags"]
        assert table.row_count == 2

    def test_print_titles_table(self, videos: list[VideoInfo]) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=120)

        SummaryTableRenderer(console).print_titles_table(videos)

        output = buffer.getvalue()
        assert "Resolved Titles" in output
        assert "Movie" in output
        assert "2010" in output


class TestPlainText:
    def test_plain_text(self, videos: list[VideoInfo]) -> None:
        text = SummaryTableRenderer.render_titles_plain_text(videos)

        lines = text.splitlines()
        assert lines[1] == "Resolved Titles"
        assert "    Movie (2010)" in lines
        assert "        extra     : /m/Movie-trailer.mp4 (trailer)" in lines
        assert "        alternate : /m/Other [hsbs].mkv" in lines
