"""
Lightweight text markup.

Usage:
    from phrasal.markup import BoldRule, MarkupEngine

    engine = MarkupEngine([BoldRule()])
    engine.apply("**Careful**: <tags> are escaped")
    # Markup('<strong>Careful</strong>: &lt;tags&gt; are escaped')
"""

from phrasal.markup.engine import MarkupEngine
from phrasal.markup.rules import BoldRule, MarkupRule

__all__ = [
    "MarkupEngine",
    "MarkupRule",
    "BoldRule",
]
