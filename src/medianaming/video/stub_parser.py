"""Detects ``.disc`` stub files and their stub type."""

from __future__ import annotations

import logging

from ..config import NamingOptions
from ..logging_utils import render_fields_block
from ..media_types import is_stub_file
from ..models import StubResult
from ..paths import extension, file_name_without_extension

LOGGER = logging.getLogger(__name__)


class StubParser:
    """Recognises placeholder files such as ``Movie.dvd.disc``.

    The outer extension marks the file as a stub; the inner extension is the
    token naming the physical media.
    """

    def __init__(self, options: NamingOptions) -> None:
        self.options = options

    def parse_file(self, path: str) -> StubResult:
        if not is_stub_file(path, self.options):
            return StubResult()

        token = extension(file_name_without_extension(path)).lstrip(".").lower()
        stub_type = next(
            (rule.stub_type for rule in self.options.stub_types if rule.token.lower() == token),
            None,
        )
        LOGGER.debug(
            render_fields_block(
                "Stub File",
                {"Path": path, "Token": token or None, "Stub Type": stub_type},
            )
        )
        return StubResult(is_stub=True, stub_type=stub_type)
