"""
Value types shared by the translation engine.

- Variants and TranslationTable model translation catalogs
- Number wraps a locale-aware numeric argument
- Sex, PersonLike and Person model grammatical gender selectors
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Union, runtime_checkable

from phrasal.i18n.errors import ConfigurationError


class Variants(tuple):
    """
    Ordered alternatives of a translation, one per grammatical form.

    Items are either strings or nested Variants, one nesting level per
    variant selector (e.g. gender x count).
    """

    __slots__ = ()

    @classmethod
    def from_value(cls, value: Any) -> TranslationValue:
        """
        Convert a raw catalog value into a translation value.

        Args:
            value: String, or (nested) list/tuple of strings

        Returns:
            The string unchanged, or a Variants tree

        Raises:
            ConfigurationError: If the value (or any nested item) has an
                unsupported type or a list is empty
        """
        if isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            if not value:
                raise ConfigurationError("Variant lists must not be empty.")
            return cls(cls.from_value(item) for item in value)
        raise ConfigurationError(
            f"Unsupported translation value of type {type(value).__name__}: {value!r}"
        )

    def __repr__(self) -> str:
        return f"Variants({list(self)!r})"

    def leaves(self) -> Iterator[str]:
        """Iterate over every string form, depth first."""
        for item in self:
            if isinstance(item, Variants):
                yield from item.leaves()
            else:
                yield item


TranslationValue = Union[str, Variants]


class TranslationTable(Mapping):
    """
    Read-only mapping from source strings to translations.

    Example:
        TranslationTable({
            "color": "colour",
            "%d beer(s)": ["%d beer", "%d beers"],
        })
    """

    def __init__(self, translations: Mapping[str, Any] | None = None):
        self._translations: dict[str, TranslationValue] = {}
        for key, value in (translations or {}).items():
            if not isinstance(key, str):
                raise ConfigurationError(f"Translation keys must be strings, got {key!r}.")
            self._translations[key] = Variants.from_value(value)

    def __getitem__(self, key: str) -> TranslationValue:
        return self._translations[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self) -> str:
        return f"TranslationTable({self._translations!r})"


@dataclass(frozen=True)
class Number:
    """
    A number to be rendered with the active locale's separators.

    Also usable as a variant selector, in which case its numeric value is used.
    """

    number: int | float
    decimals: int = 0


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


@runtime_checkable
class PersonLike(Protocol):
    """Anything carrying a grammatical gender."""

    sex: Sex


@dataclass(frozen=True)
class Person:
    name: str
    sex: Sex = Sex.MALE

    def __str__(self) -> str:
        return self.name
