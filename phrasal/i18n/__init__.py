"""
Internationalization (i18n) package for phrasal.

Provides:
- Translation lookup with source-string fallback
- Plural and gender variants chosen by per-locale grammars
- printf-style interpolation with locale-formatted numbers
- HTML-safe translation when arguments are markup
- Validation that translations keep their markup
- Locale preference persistence and OS locale detection

Usage:
    from phrasal.i18n import Number, configure, pht

    configure("cs_CZ", {"%d file(s)": ["%d soubor", "%d soubory", "%d souborů"]})

    print(pht("%d file(s)", 3))  # "3 soubory"
    print(pht("%s bytes", Number(1234567)))  # "1,234,567 bytes"

Supported locales:
    - en_US, en_GB: English
    - en_W*, en_R*, en_A*: English pseudo-locales
    - cs_CZ: Czech
    - de_DE: German (no variant grammar)
"""

from phrasal.i18n.catalog import load_catalog, load_locale_catalog
from phrasal.i18n.config import LocaleConfig
from phrasal.i18n.detector import detect_os_locale
from phrasal.i18n.errors import ConfigurationError
from phrasal.i18n.locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    get_locale,
    get_supported_locales,
)
from phrasal.i18n.translator import (
    CustomTranslator,
    Translator,
    configure,
    get_translator,
    pht,
    reset_translator,
    set_translator,
    use_translator,
)
from phrasal.i18n.types import Number, Person, PersonLike, Sex, TranslationTable, Variants
from phrasal.i18n.validator import find_invalid_translations, validate_translation
from phrasal.i18n.variants import choose_variant

__all__ = [
    # Core translation
    "pht",
    "Translator",
    "CustomTranslator",
    "configure",
    "get_translator",
    "set_translator",
    "use_translator",
    "reset_translator",
    # Values
    "Number",
    "Person",
    "PersonLike",
    "Sex",
    "TranslationTable",
    "Variants",
    "choose_variant",
    # Locales
    "Locale",
    "get_locale",
    "get_supported_locales",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Validation
    "validate_translation",
    "find_invalid_translations",
    # Catalogs and configuration
    "load_catalog",
    "load_locale_catalog",
    "LocaleConfig",
    "detect_os_locale",
    # Errors
    "ConfigurationError",
]
