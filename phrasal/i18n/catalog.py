"""
Loading translation tables from YAML catalogs.

A catalog maps source strings to translations; lists hold the variants
of a string, nested lists one level per selector:

    "color": "colour"
    "%d beer(s)":
      - "%d beer"
      - "%d beers"
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from phrasal.i18n.types import TranslationTable

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> TranslationTable:
    """
    Load a translation table from a YAML file.

    Args:
        path: Catalog file

    Returns:
        The table. Missing or unreadable files and malformed YAML give an
        empty table, so the application runs untranslated instead of failing.

    Raises:
        ConfigurationError: If the file parses but holds invalid values
    """
    catalog_path = Path(path)

    if not catalog_path.exists():
        logger.debug(f"No catalog at {catalog_path}")
        return TranslationTable()

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Could not load catalog {catalog_path}: {e}")
        return TranslationTable()

    if data is None:
        return TranslationTable()
    if not isinstance(data, dict):
        logger.warning(
            f"Catalog {catalog_path} contains {type(data).__name__}, expected a mapping"
        )
        return TranslationTable()

    table = TranslationTable(data)
    logger.debug(f"Loaded {len(table)} translations from {catalog_path}")
    return table


def load_locale_catalog(directory: str | Path, code: str) -> TranslationTable:
    """Load <directory>/<code>.yaml."""
    return load_catalog(Path(directory) / f"{code}.yaml")
