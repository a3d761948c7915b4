"""
OS locale auto-detection.

Detects the system locale from environment variables:
- LANGUAGE
- LC_ALL
- LC_MESSAGES
- LANG
"""

from __future__ import annotations

import os
import re


def _get_supported_locale_codes() -> set[str]:
    # Import here to avoid circular import
    from phrasal.i18n.locales import SUPPORTED_LOCALES

    return set(SUPPORTED_LOCALES.keys())


# Normalized locale names (lowercase, underscores) to supported locale codes
LOCALE_MAPPINGS = {
    # English variants
    "en": "en_US",
    "en_us": "en_US",
    "en_ca": "en_US",
    "en_au": "en_US",
    "en_gb": "en_GB",
    "en_ie": "en_GB",
    "english": "en_US",
    # Czech variants
    "cs": "cs_CZ",
    "cs_cz": "cs_CZ",
    "cz": "cs_CZ",
    "czech": "cs_CZ",
    # German variants
    "de": "de_DE",
    "de_de": "de_DE",
    "de_at": "de_DE",
    "de_ch": "de_DE",
    "german": "de_DE",
    # C locale defaults to English
    "c": "en_US",
    "posix": "en_US",
}

FALLBACK_LOCALE = "en_US"


def parse_locale(locale_string: str) -> str | None:
    """
    Parse a locale string into a supported locale code.

    Handles formats like:
    - en_US.UTF-8
    - cs_CZ
    - en-GB
    - de
    - de_DE.utf8@euro

    Args:
        locale_string: Raw locale string from environment

    Returns:
        Supported locale code or None if cannot parse
    """
    if not locale_string:
        return None

    locale_lower = locale_string.lower().strip()
    if not locale_lower:
        return None

    locale_lower = locale_lower.replace("-", "_")

    # Remove encoding and @modifier suffixes
    locale_lower = re.sub(r"\.[a-z0-9_-]+(@[a-z]+)?$", "", locale_lower)
    locale_lower = re.sub(r"@[a-z]+$", "", locale_lower)

    if locale_lower in LOCALE_MAPPINGS:
        return LOCALE_MAPPINGS[locale_lower]

    # Unknown region of a known language, e.g. "cs_sk"
    if "_" in locale_lower:
        lang_part = locale_lower.split("_")[0]
        if lang_part in LOCALE_MAPPINGS:
            return LOCALE_MAPPINGS[lang_part]

    return None


def detect_os_locale() -> str:
    """
    Detect the OS locale from environment variables.

    Checks environment variables in order:
    1. LANGUAGE (GNU gettext, may list several locales separated by ':')
    2. LC_ALL
    3. LC_MESSAGES
    4. LANG

    Returns:
        First supported locale code found, or 'en_US' as fallback

    Examples:
        With LANG=cs_CZ.UTF-8: returns 'cs_CZ'
        With LANGUAGE=en_GB:en: returns 'en_GB'
    """
    supported = _get_supported_locale_codes()

    for var in ["LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"]:
        value = os.environ.get(var, "")
        if not value:
            continue

        candidates = value.split(":") if var == "LANGUAGE" else [value]
        for candidate in candidates:
            parsed = parse_locale(candidate)
            if parsed and parsed in supported:
                return parsed

    return FALLBACK_LOCALE


def get_os_locale_info() -> dict[str, str | None]:
    """
    Get detailed OS locale information for debugging.

    Returns:
        Dictionary with all relevant locale environment variables
    """
    env_vars = ["LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG", "LC_CTYPE", "LC_TIME", "LC_NUMERIC"]

    info: dict[str, str | None] = {var: os.environ.get(var) for var in env_vars}
    info["detected_locale"] = detect_os_locale()
    return info
