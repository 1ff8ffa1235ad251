"""Classifies extras (trailers, samples, theme songs) by file name or suffix."""

from __future__ import annotations

import logging

from ..config import MEDIA_TYPE_AUDIO, MEDIA_TYPE_VIDEO, RULE_TYPE_FILENAME, RULE_TYPE_SUFFIX, ExtraRule, NamingOptions
from ..media_types import is_audio_file, is_video_file
from ..models import ExtraResult
from ..paths import file_name_without_extension

LOGGER = logging.getLogger(__name__)


class ExtraTypeParser:
    """Classifies bonus content (trailers, samples, theme songs...).

    Rules are evaluated in order and the first rule whose media-type gate and
    name predicate both pass decides the extra type.
    """

    def __init__(self, options: NamingOptions) -> None:
        self.options = options

    def get_extra_info(self, path: str) -> ExtraResult:
        for rule in self.options.extra_rules:
            result = self._apply_rule(path, rule)
            if result.extra_type:
                LOGGER.debug("Extra %s matched rule %s %r (%s)", path, rule.rule_type, rule.token, rule.extra_type)
                return result
        return ExtraResult()

    def _passes_media_gate(self, path: str, rule: ExtraRule) -> bool:
        if rule.media_type == MEDIA_TYPE_AUDIO:
            return is_audio_file(path, self.options)
        if rule.media_type == MEDIA_TYPE_VIDEO:
            return is_video_file(path, self.options)
        return False

    def _apply_rule(self, path: str, rule: ExtraRule) -> ExtraResult:
        if not self._passes_media_gate(path, rule):
            return ExtraResult()

        stem = file_name_without_extension(path).lower()
        token = rule.token.lower()
        if rule.rule_type == RULE_TYPE_FILENAME:
            matched = stem == token
        elif rule.rule_type == RULE_TYPE_SUFFIX:
            matched = stem.endswith(token)
        else:
            matched = False

        if not matched:
            return ExtraResult()
        return ExtraResult(extra_type=rule.extra_type, tokens=[rule.token], rule=rule)
