"""
Checks that translations keep the markup of their source strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

from phrasal.i18n.types import TranslationValue, Variants

# Tag openings ("<b>", "</a>", "<br") and entities ("&amp;", "&nbsp;").
_MARKUP_TOKEN = re.compile(r"<(\S[^>]*>?)?|&(\S[^;]*;?)?", re.IGNORECASE)


def _markup_tokens(text: str) -> list[str]:
    return sorted(match.group(0) for match in _MARKUP_TOKEN.finditer(text))


def validate_translation(original: str, translation: str) -> bool:
    """
    Check that a translation contains the same tags and entities as the original.

    Order does not matter, a translation may move a tag around; it may not
    drop, add or alter one.

    Args:
        original: Source string
        translation: Translated string

    Returns:
        True if both strings carry the same markup tokens
    """
    return _markup_tokens(original) == _markup_tokens(translation)


def find_invalid_translations(
    translations: Mapping[str, TranslationValue],
) -> Iterator[tuple[str, str]]:
    """
    Yield (key, translation) for every form that fails validate_translation().

    Variant lists are flattened, each form is compared against the key.
    """
    for key, value in translations.items():
        forms = value.leaves() if isinstance(value, Variants) else [value]
        for form in forms:
            if not validate_translation(key, form):
                yield key, form
