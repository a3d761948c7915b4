"""
Locale descriptors.

A locale names itself, owns the grammar used to pick translation variants
and may post-process translated strings (pseudo-locales used to test
layouts and find untranslated text do this).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from phrasal.i18n.errors import ConfigurationError
from phrasal.i18n.variants import CzechGrammar, EnglishGrammar, Grammar, UnknownGrammar

DEFAULT_LOCALE = "en_US"


class Locale:
    """Base locale. Subclasses set `code`, `name` and `grammar_class`."""

    code: str = ""
    name: str = ""
    grammar_class: type[Grammar] = UnknownGrammar
    should_post_process: bool = False

    def __init__(self) -> None:
        self.grammar = self.grammar_class(self.code)

    def did_translate_string(
        self, text: str, translation: str, args: Sequence[Any], result: str
    ) -> str:
        """
        Hook called with every translated string when `should_post_process`.

        Args:
            text: Original key passed to translate()
            translation: Chosen template before interpolation
            args: Arguments after number formatting and escaping
            result: Interpolated string

        Returns:
            The string to return to the caller
        """
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.code}>"


class EnglishLocale(Locale):
    code = "en_US"
    name = "English (US)"
    grammar_class = EnglishGrammar


class BritishEnglishLocale(Locale):
    code = "en_GB"
    name = "English (Great Britain)"
    grammar_class = EnglishGrammar


class WhimsicalEnglishLocale(Locale):
    code = "en_W*"
    name = "English (Whimsical)"
    grammar_class = EnglishGrammar


class RawStringsEnglishLocale(Locale):
    """Shows the untranslated source strings; handy for finding where text comes from."""

    code = "en_R*"
    name = "English (Raw Strings)"
    grammar_class = EnglishGrammar
    should_post_process = True

    def did_translate_string(self, text, translation, args, result):
        return text


class AllCapsEnglishLocale(Locale):
    """Upper-cases everything so hardcoded strings stand out."""

    code = "en_A*"
    name = "English (ALL CAPS)"
    grammar_class = EnglishGrammar
    should_post_process = True

    def did_translate_string(self, text, translation, args, result):
        return result.upper()


class CzechLocale(Locale):
    code = "cs_CZ"
    name = "Czech (CZ)"
    grammar_class = CzechGrammar


class GermanLocale(Locale):
    code = "de_DE"
    name = "German (DE)"


SUPPORTED_LOCALES: dict[str, type[Locale]] = {
    cls.code: cls
    for cls in (
        EnglishLocale,
        BritishEnglishLocale,
        WhimsicalEnglishLocale,
        RawStringsEnglishLocale,
        AllCapsEnglishLocale,
        CzechLocale,
        GermanLocale,
    )
}


def get_locale(code: str) -> Locale:
    """
    Create the locale registered under a code.

    Raises:
        ConfigurationError: If no locale has this code
    """
    try:
        return SUPPORTED_LOCALES[code]()
    except KeyError:
        raise ConfigurationError(
            f"Unsupported locale: {code}. Supported: {', '.join(SUPPORTED_LOCALES)}"
        ) from None


def get_supported_locales() -> dict[str, str]:
    """Map every supported locale code to its display name."""
    return {code: cls.name for code, cls in SUPPORTED_LOCALES.items()}
