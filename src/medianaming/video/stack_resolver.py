"""Part stacking (``Movie cd1.avi`` + ``Movie cd2.avi`` -> one title).

Each stacking expression captures ``(title)(volume)(ignore)(extension)``.
Consecutive files (in path order) form a stack when they match the same
expression with an equal title, ignore part and extension but a different
volume.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import NamingOptions
from ..logging_utils import render_section_block
from ..models import FileMetadata, Stack, StackResult
from ..paths import file_name
from ..regex_provider import DEFAULT_REGEX_PROVIDER, RegexProvider

LOGGER = logging.getLogger(__name__)

# Directory names carry no extension; give them one so the extension-anchored
# expressions still apply.
DIRECTORY_SUFFIX = ".mkv"


@dataclass(slots=True, frozen=True)
class _PartMatch:
    title: str
    volume: str
    ignore: str
    extension: str

    def continues(self, other: "_PartMatch") -> bool:
        return (
            self.title.lower() == other.title.lower()
            and self.volume.lower() != other.volume.lower()
            and self.ignore.lower() == other.ignore.lower()
            and self.extension.lower() == other.extension.lower()
        )


class StackResolver:
    def __init__(self, options: NamingOptions, regex_provider: Optional[RegexProvider] = None) -> None:
        self.options = options
        self.regex_provider = regex_provider or DEFAULT_REGEX_PROVIDER

    def resolve_files(self, paths: Iterable[str]) -> StackResult:
        return self.resolve(FileMetadata(path) for path in paths)

    def resolve_directories(self, paths: Iterable[str]) -> StackResult:
        return self.resolve(FileMetadata(path, is_folder=True) for path in paths)

    def resolve(self, files: Iterable[FileMetadata]) -> StackResult:
        ordered = sorted(files, key=lambda item: (item.path, item.is_folder))
        result = StackResult()
        index = 0
        while index < len(ordered):
            stack = self._stack_at(ordered, index)
            if stack is None:
                index += 1
                continue
            result.stacks.append(stack)
            index += len(stack.files)

        if result.stacks:
            LOGGER.debug(
                render_section_block(
                    "Stacks Resolved",
                    [(stack.name, stack.files) for stack in result.stacks],
                )
            )
        return result

    def _match(self, item: FileMetadata, expression: str) -> Optional[_PartMatch]:
        name = file_name(item.path)
        if item.is_folder:
            name += DIRECTORY_SUFFIX
        regex = self.regex_provider.get_regex(expression, re.IGNORECASE)
        if regex.groups < 4:
            return None
        match = regex.match(name)
        if match is None:
            return None
        return _PartMatch(*(match.group(number) or "" for number in range(1, 5)))

    def _stack_at(self, ordered: list[FileMetadata], index: int) -> Optional[Stack]:
        first = ordered[index]
        for expression in self.options.stacking_expressions:
            head = self._match(first, expression)
            if head is None or not head.title.strip():
                continue

            files = [first.path]
            for candidate in ordered[index + 1 :]:
                if candidate.is_folder != first.is_folder:
                    break
                part = self._match(candidate, expression)
                if part is None or not head.continues(part):
                    break
                files.append(candidate.path)

            if len(files) > 1:
                name = (head.title + head.ignore).strip()
                return Stack(name=name, is_directory_stack=first.is_folder, files=files)
        return None
