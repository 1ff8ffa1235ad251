"""Compiled-pattern providers.

Every resolver compiles the configured pattern tables through a
``RegexProvider``. The default provider is a process-wide read-through cache
keyed by pattern text and flags; ``functools.lru_cache`` is safe to share
between threads, so resolvers created on different threads can reuse it.
Tests can substitute ``UncachedRegexProvider`` or any object with the same
``get_regex`` method.
"""

from __future__ import annotations

import functools
import re
from typing import Protocol


class RegexProvider(Protocol):
    def get_regex(self, pattern: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
        ...


@functools.lru_cache(maxsize=1024)
def _compile_cached(pattern: str, flags: int) -> re.Pattern[str]:
    return re.compile(pattern, flags)


class CachedRegexProvider:
    """Read-through cache shared by every instance."""

    def get_regex(self, pattern: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
        return _compile_cached(pattern, flags)

    @staticmethod
    def cache_info() -> functools._CacheInfo:
        """Return hits, misses, maxsize and currsize of the shared cache."""
        return _compile_cached.cache_info()

    @staticmethod
    def clear() -> None:
        _compile_cached.cache_clear()


class UncachedRegexProvider:
    """Compiles on every call."""

    def get_regex(self, pattern: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
        return re.compile(pattern, flags)


DEFAULT_REGEX_PROVIDER = CachedRegexProvider()
