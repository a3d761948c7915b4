"""
Catalog linter: reports translations that lost or changed their markup.

Usage:
    phrasal-lint locales/cs_CZ.yaml locales/de_DE.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from phrasal import __version__, ui
from phrasal.i18n.catalog import load_catalog
from phrasal.i18n.errors import ConfigurationError
from phrasal.i18n.types import TranslationTable
from phrasal.i18n.validator import find_invalid_translations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintIssue:
    source: str
    translation: str
    catalog: str = ""


def lint_catalog(translations: Mapping[str, Any], catalog: str = "") -> list[LintIssue]:
    """
    Validate every translation of a table against its source string.

    Args:
        translations: Translation table, or a raw mapping
        catalog: Name reported with each issue (usually the file path)

    Returns:
        One issue per translation form whose tags or entities differ
    """
    if not isinstance(translations, TranslationTable):
        translations = TranslationTable(translations)
    return [
        LintIssue(source, translation, catalog)
        for source, translation in find_invalid_translations(translations)
    ]


def render_report(issues: list[LintIssue]) -> None:
    if not issues:
        ui.success("All translations keep their markup")
        return

    ui.data_table(
        columns=[
            {"name": "Catalog", "style": "dim", "no_wrap": True},
            {"name": "Source", "style": "cyan"},
            {"name": "Translation", "style": "white"},
        ],
        rows=[[issue.catalog, issue.source, issue.translation] for issue in issues],
        title="Translations with mismatched markup",
    )
    ui.error(f"{len(issues)} translation(s) do not match their source markup")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="phrasal-lint",
        description="Check that translation catalogs keep the tags and entities of their sources",
    )
    parser.add_argument("--version", "-V", action="version", version=f"phrasal {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed output")
    parser.add_argument("catalogs", nargs="+", help="YAML catalog files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    issues: list[LintIssue] = []
    for path in args.catalogs:
        try:
            issues += lint_catalog(load_catalog(path), catalog=path)
        except ConfigurationError as e:
            ui.error(f"Invalid catalog {path}", str(e))
            return 2

    render_report(issues)
    return 1 if issues else 0


if __name__ == "__main__":
    sys.exit(main())
