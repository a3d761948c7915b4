"""
Core translation module.

Provides message translation with:
- Lookup in an in-memory translation table, falling back to the source string
- Variant selection (plural, gender) through the locale's grammar
- printf-style interpolation with locale-formatted numbers
- HTML escaping when any argument is safe markup
- Optional delegation to an external translation service
"""

from __future__ import annotations

import contextvars
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from markupsafe import Markup, escape

from phrasal.i18n.formatter import number_format, tokenize_date_format
from phrasal.i18n.locales import Locale, get_locale
from phrasal.i18n.sprintf import InterpolationError, vsprintf
from phrasal.i18n.types import Number, TranslationTable, TranslationValue, Variants
from phrasal.i18n.validator import validate_translation
from phrasal.i18n.variants import choose_variant

logger = logging.getLogger(__name__)

INVALID_TRANSLATION = "[Invalid Translation!] %s"

# Marks arguments of Translator.configure() that were not passed
_KEEP = object()


class CustomTranslator(ABC):
    """
    External translation service the translator can defer to.

    When configured it replaces both the local lookup result and the local
    variant grammar.
    """

    @abstractmethod
    def translate(self, text: str) -> str:
        """Translate a plain string."""

    @abstractmethod
    def plural_translate(self, variants: Variants, variant: Any) -> str:
        """Pick and translate one of `variants` for the selector `variant`."""


class Translator:
    """
    Translates strings for one locale.

    Instances are immutable: configure() returns a new translator, so one
    instance can be shared between threads and a different locale never
    leaks into another caller's strings.

    Example:
        translator = Translator(
            get_locale("en_US"),
            {"%d beer(s)": ["%d beer", "%d beers"]},
        )
        translator.translate("%d beer(s)", 3)  # "3 beers"
    """

    def __init__(
        self,
        locale: Locale,
        translations: Mapping[str, Any] | None = None,
        custom_translator: CustomTranslator | None = None,
    ):
        """
        Initialize the translator.

        Args:
            locale: Active locale
            translations: Source string -> translation; lists are variants
            custom_translator: Optional external service taking over lookup
                and variant choice

        Raises:
            ConfigurationError: If a variant list does not fit the locale grammar
        """
        if not isinstance(translations, TranslationTable):
            translations = TranslationTable(translations)

        self._locale = locale
        self._translations = translations
        self._custom_translator = custom_translator

        # An external service picks variants itself, its tables may be shaped differently.
        if custom_translator is None:
            for key, value in translations.items():
                locale.grammar.validate(value, key)

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def translations(self) -> TranslationTable:
        return self._translations

    @property
    def custom_translator(self) -> CustomTranslator | None:
        return self._custom_translator

    def configure(
        self,
        locale: Locale | None = None,
        translations: Mapping[str, Any] | None = None,
        custom_translator: CustomTranslator | None | object = _KEEP,
    ) -> Translator:
        """
        Return a copy with some parts replaced; unspecified parts are kept.

        Passing custom_translator=None drops the current custom translator.
        """
        if custom_translator is _KEEP:
            custom_translator = self._custom_translator
        return Translator(
            locale or self._locale,
            self._translations if translations is None else translations,
            custom_translator,
        )

    def _resolve(self, text: str, args: tuple[Any, ...]) -> str:
        translation: TranslationValue = self._translations.get(text, text)
        if text not in self._translations:
            logger.debug(f"No translation for {text!r}, using source string")

        if self._custom_translator is not None:
            if isinstance(translation, Variants):
                variant = args[0] if args else None
                if isinstance(variant, Number):
                    variant = variant.number
                return self._custom_translator.plural_translate(translation, variant)
            return self._custom_translator.translate(translation)

        # One selector argument per nesting level.
        level = 0
        while isinstance(translation, Variants):
            selector = args[level] if level < len(args) else None
            translation = choose_variant(translation, selector, self._locale.grammar)
            level += 1
        return translation

    def translate(self, text: str, *args: Any) -> str:
        """
        Translate a string and fill in its arguments.

        Args:
            text: Source string, used as lookup key and as the fallback
            *args: Values for the % directives. The leading ones also select
                variants, one per nesting level of the translation.

        Returns:
            Translated string. If any argument is Markup, a Markup with all
            arguments escaped. A template that cannot be filled is returned
            as "[Invalid Translation!] <template>".

        Raises:
            ConfigurationError: If the locale grammar cannot handle a variant list

        Examples:
            >>> translator.translate("%s owns %s.", "alice", "a cat")
            "a cat is owned by alice."

            >>> translator.translate("%s beer(s)", Number(1234))
            "1,234 beers"

            Formatted numbers are strings, use %s for them.
        """
        translation = self._resolve(text, args)

        values = [
            self.format_number(arg.number, arg.decimals) if isinstance(arg, Number) else arg
            for arg in args
        ]

        # Escape every argument, not just the markup ones, or plain text
        # next to markup would be injected unescaped.
        is_html = any(isinstance(arg, Markup) for arg in values)
        if is_html:
            values = [str(escape(arg)) for arg in values]

        if values:
            try:
                result = vsprintf(translation, values)
            except InterpolationError as e:
                logger.warning(f"Invalid translation for {text!r}: {e}")
                result = INVALID_TRANSLATION % translation
        else:
            result = translation

        if self._locale.should_post_process:
            result = self._locale.did_translate_string(text, translation, values, result)

        if is_html:
            result = Markup(result)

        return result

    def translate_date(self, fmt: str, date: datetime) -> str:
        """
        Format a date and translate the words in it.

        Args:
            fmt: Format accepted by datetime.strftime()
            date: Date to format

        Returns:
            Formatted date with weekday, month and AM/PM names translated
        """
        parts = []
        for chunk, translatable in tokenize_date_format(fmt):
            part = date.strftime(chunk)
            if translatable:
                part = self.translate(part)
            parts.append(part)
        return "".join(parts)

    def format_number(self, number: int | float, decimals: int = 0) -> str:
        """
        Format a number with grouped thousands and optional decimal part.

        Separators are the translations of "." (decimal point) and ","
        (thousands separator).
        """
        return number_format(number, decimals, self.translate("."), self.translate(","))

    def validate_translation(self, original: str, translation: str) -> bool:
        """Check that `translation` keeps the tags and entities of `original`."""
        return validate_translation(original, translation)


# Active translator of the current execution context
_translator: contextvars.ContextVar[Translator | None] = contextvars.ContextVar(
    "phrasal_translator", default=None
)


def _build_default_translator() -> Translator:
    from phrasal.i18n.catalog import load_locale_catalog
    from phrasal.i18n.config import LocaleConfig

    config = LocaleConfig()
    code = config.get_locale()
    catalog_dir = config.get_catalog_dir()
    translations = load_locale_catalog(catalog_dir, code) if catalog_dir else None
    logger.debug(f"Using locale {code}")
    return Translator(get_locale(code), translations)


def get_translator() -> Translator:
    """
    Get the translator of the current context.

    If none was configured, one is built from LocaleConfig (environment,
    preferences file, OS locale) and bound to the context.
    """
    translator = _translator.get()
    if translator is None:
        translator = _build_default_translator()
        _translator.set(translator)
    return translator


def set_translator(translator: Translator) -> None:
    """Make `translator` the active one in the current context."""
    _translator.set(translator)


def configure(
    locale: Locale | str,
    translations: Mapping[str, Any] | None = None,
    custom_translator: CustomTranslator | None = None,
) -> Translator:
    """
    Build a translator and make it the active one in the current context.

    Args:
        locale: Locale or locale code
        translations: Translation table
        custom_translator: Optional external translation service

    Returns:
        The new translator
    """
    if isinstance(locale, str):
        locale = get_locale(locale)
    translator = Translator(locale, translations, custom_translator)
    set_translator(translator)
    return translator


@contextmanager
def use_translator(translator: Translator) -> Iterator[Translator]:
    """
    Make `translator` active for the duration of a block.

    Usage:
        with use_translator(Translator(get_locale("cs_CZ"), table)):
            render_page()
    """
    token = _translator.set(translator)
    try:
        yield translator
    finally:
        _translator.reset(token)


def reset_translator() -> None:
    """Forget the active translator (mainly for testing)."""
    _translator.set(None)


def pht(text: str, *args: Any) -> str:
    """
    Translate with the active translator (shorthand function).

    Examples:
        >>> pht("%d file(s)", 2)
        "2 files"
    """
    return get_translator().translate(text, *args)
