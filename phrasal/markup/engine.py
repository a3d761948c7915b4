"""
Runs markup rules over a block of text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from markupsafe import Markup

if TYPE_CHECKING:
    from phrasal.markup.rules import MarkupRule

logger = logging.getLogger(__name__)


class MarkupEngine:
    """
    Applies rules in ascending priority order.

    In text mode rules leave the text as plain text, otherwise the result is
    escaped HTML returned as Markup.
    """

    def __init__(self, rules: Iterable[MarkupRule] = (), text_mode: bool = False):
        self._text_mode = text_mode
        self._rules: list[MarkupRule] = []
        for rule in rules:
            self.add_rule(rule)

    def add_rule(self, rule: MarkupRule) -> MarkupEngine:
        rule.set_engine(self)
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.get_priority())
        return self

    def get_rules(self) -> list[MarkupRule]:
        return list(self._rules)

    def is_text_mode(self) -> bool:
        return self._text_mode

    def apply(self, text: str) -> str | Markup:
        for rule in self._rules:
            logger.debug(f"Applying {type(rule).__name__}")
            text = rule.apply(text)
        return text
