"""
Tests for the catalog linter.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch


class TestLintCatalog(unittest.TestCase):
    """Tests for lint_catalog() and render_report()."""

    def test_reports_mismatched_forms(self):
        from phrasal.lint import LintIssue, lint_catalog

        issues = lint_catalog(
            {
                "<b>%d</b> file(s)": ["<b>%d</b> soubor", "%d soubory", "<b>%d</b> souborů"],
                "Save &amp; close": "Uložit &amp; zavřít",
            },
            catalog="cs_CZ.yaml",
        )

        self.assertEqual(issues, [LintIssue("<b>%d</b> file(s)", "%d soubory", "cs_CZ.yaml")])

    def test_clean_catalog(self):
        from phrasal.lint import lint_catalog

        self.assertEqual(lint_catalog({"<i>%s</i>": "<i>%s</i>!"}), [])

    def test_render_report_success(self):
        from phrasal.lint import render_report

        with patch("phrasal.ui.success") as success, patch("phrasal.ui.data_table") as table:
            render_report([])

        success.assert_called_once()
        table.assert_not_called()

    def test_render_report_issues(self):
        from phrasal.lint import LintIssue, render_report

        issues = [LintIssue("<b>x</b>", "x", "de_DE.yaml")]
        with patch("phrasal.ui.data_table") as table, patch("phrasal.ui.error") as error:
            render_report(issues)

        rows = table.call_args.kwargs["rows"]
        self.assertEqual(rows, [["de_DE.yaml", "<b>x</b>", "x"]])
        error.assert_called_once()


class TestLintMain(unittest.TestCase):
    """Tests for the phrasal-lint entry point."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)
        self.console = patch("phrasal.ui.console")
        self.console.start()

    def tearDown(self):
        self.console.stop()
        self.temp_dir.cleanup()

    def _catalog(self, name, content):
        path = self.dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_clean_catalogs_exit_zero(self):
        from phrasal.lint import main

        path = self._catalog("cs_CZ.yaml", '"<b>Save</b>": "<b>Uložit</b>"\n')

        self.assertEqual(main([path]), 0)

    def test_mismatch_exits_one(self):
        from phrasal.lint import main

        good = self._catalog("cs_CZ.yaml", '"<b>Save</b>": "<b>Uložit</b>"\n')
        bad = self._catalog("de_DE.yaml", '"<b>Save</b>": "Speichern"\n')

        self.assertEqual(main([good, bad]), 1)

    def test_invalid_catalog_exits_two(self):
        from phrasal.lint import main

        path = self._catalog("cs_CZ.yaml", '"Save":\n  nested: mapping\n')

        self.assertEqual(main([path]), 2)


if __name__ == "__main__":
    unittest.main()
