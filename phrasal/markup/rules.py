"""
Markup rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from markupsafe import Markup, escape

if TYPE_CHECKING:
    from phrasal.markup.engine import MarkupEngine


class MarkupRule:
    """
    Base class for a single rewrite of the text.

    Lower priorities run first.
    """

    def __init__(self) -> None:
        self._engine: MarkupEngine | None = None

    def get_priority(self) -> float:
        return 500.0

    def set_engine(self, engine: MarkupEngine) -> None:
        self._engine = engine

    def get_engine(self) -> MarkupEngine:
        if self._engine is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to an engine")
        return self._engine

    def apply(self, text: str) -> str | Markup:
        raise NotImplementedError

    def replace_html(
        self,
        pattern: str,
        callback: Callable[[Sequence[Markup]], str],
        text: str,
        flags: int = 0,
    ) -> Markup:
        """
        Run a regex replacement over the escaped text.

        The text is escaped first, so the pattern sees what the browser
        will see; matched groups reach the callback as Markup and the
        callback's return value is escaped unless it is Markup itself.

        Args:
            pattern: Regular expression
            callback: Receives [whole match, group 1, ...]
            text: Plain text or Markup
            flags: re flags

        Returns:
            The rewritten text as Markup
        """

        def replace(match: re.Match) -> str:
            groups = [Markup(match.group(0))]
            groups += [Markup(group or "") for group in match.groups()]
            return str(escape(callback(groups)))

        return Markup(re.sub(pattern, replace, str(escape(text)), flags=flags))


class BoldRule(MarkupRule):
    """**text** -> <strong>text</strong>"""

    def get_priority(self) -> float:
        return 1000.0

    def apply(self, text: str) -> str | Markup:
        if self.get_engine().is_text_mode():
            return text

        return self.replace_html(r"\*\*(.+?)\*\*", self._apply_callback, text, flags=re.DOTALL)

    def _apply_callback(self, matches: Sequence[Markup]) -> Markup:
        return Markup("<strong>%s</strong>") % matches[1]
