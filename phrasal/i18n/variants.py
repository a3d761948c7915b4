"""
Variant selection for translations with several grammatical forms.

Each locale owns a grammar object which knows how many forms its
translations carry and which one a selector picks:

    grammar = EnglishGrammar()
    choose_variant(Variants(["%d beer", "%d beers"]), 3, grammar)  # "%d beers"

Adding a language means adding a grammar, not touching the engine.
"""

from __future__ import annotations

import re
from typing import Any

from phrasal.i18n.errors import ConfigurationError
from phrasal.i18n.types import Number, PersonLike, Sex, TranslationValue, Variants


_NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")


def _as_count(selector: Any) -> int | float | None:
    """Return the selector as a number, or None if it is not a count."""
    if isinstance(selector, bool):
        return None
    if isinstance(selector, (int, float)):
        return selector
    # "1" and " 3 " are counts, "3 apples" is not.
    if isinstance(selector, str) and _NUMERIC_STRING.fullmatch(selector):
        return float(selector)
    return None


class Grammar:
    """
    Base class for per-locale variant grammars.

    Subclasses set `accepted_counts` to the variant list sizes they
    understand and implement `choose`.
    """

    accepted_counts: frozenset[int] = frozenset()

    def __init__(self, language: str = ""):
        self.language = language

    def choose(self, candidates: Variants, selector: Any) -> TranslationValue:
        raise NotImplementedError

    def _expect(self, candidates: Variants, count: int, what: str) -> None:
        if len(candidates) != count:
            raise ConfigurationError(
                f"Expected {count} {what} variants for '{self.language}', "
                f"got {len(candidates)}: {candidates!r}"
            )

    def validate(self, value: TranslationValue, key: str = "") -> None:
        """
        Check that every variant list in a translation has a usable size.

        Raises:
            ConfigurationError: If some list cannot be handled by this grammar
        """
        if not isinstance(value, Variants):
            return
        if len(value) != 1 and len(value) not in self.accepted_counts:
            if not self.accepted_counts:
                raise ConfigurationError(f"Unknown language '{self.language}'.")
            raise ConfigurationError(
                f"Translation for {key!r} has {len(value)} variants, "
                f"'{self.language}' accepts {sorted(self.accepted_counts)}"
            )
        for item in value:
            self.validate(item, key)


class UnknownGrammar(Grammar):
    """Grammar of a locale with no variant rules; any real choice fails."""

    def choose(self, candidates: Variants, selector: Any) -> TranslationValue:
        raise ConfigurationError(f"Unknown language '{self.language}'.")


class EnglishGrammar(Grammar):
    """(singular, plural); only exactly 1 (or a numeric string equal to 1) is singular."""

    accepted_counts = frozenset({2})

    def choose(self, candidates: Variants, selector: Any) -> TranslationValue:
        self._expect(candidates, 2, "singular/plural")
        singular, plural = candidates
        if _as_count(selector) == 1:
            return singular
        return plural


class CzechGrammar(Grammar):
    """
    (male, female) for person selectors, otherwise
    (singular, paucal, plural) with 2-4 being paucal. Numeric strings
    count like the numbers they spell.
    """

    accepted_counts = frozenset({2, 3})

    def choose(self, candidates: Variants, selector: Any) -> TranslationValue:
        if isinstance(selector, PersonLike):
            self._expect(candidates, 2, "male/female")
            male, female = candidates
            if selector.sex == Sex.FEMALE:
                return female
            return male

        self._expect(candidates, 3, "singular/paucal/plural")
        singular, paucal, plural = candidates
        count = _as_count(selector)
        if count is None:
            return plural
        if count == 1:
            return singular
        if 2 <= count <= 4:
            return paucal
        return plural


def choose_variant(candidates: Variants, selector: Any, grammar: Grammar) -> TranslationValue:
    """
    Pick one form out of a variant list.

    Args:
        candidates: Forms to choose from
        selector: Count, Number or person deciding the form
        grammar: Grammar of the active locale

    Returns:
        The chosen form, which may itself be a nested Variants

    Raises:
        ConfigurationError: If the grammar cannot handle the list
    """
    if len(candidates) == 1:
        return candidates[0]

    if isinstance(selector, Number):
        selector = selector.number

    return grammar.choose(candidates, selector)
