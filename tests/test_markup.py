"""
Tests for the markup engine and the bold rule.
"""

import unittest


class TestBoldRule(unittest.TestCase):
    """Tests for **bold** markup."""

    def _apply(self, text, text_mode=False):
        from phrasal.markup import BoldRule, MarkupEngine

        return MarkupEngine([BoldRule()], text_mode=text_mode).apply(text)

    def test_bold(self):
        from markupsafe import Markup

        result = self._apply("**bold** text")

        self.assertIsInstance(result, Markup)
        self.assertEqual(result, "<strong>bold</strong> text")

    def test_non_greedy(self):
        self.assertEqual(
            self._apply("**a** and **b**"),
            "<strong>a</strong> and <strong>b</strong>",
        )

    def test_spans_lines(self):
        self.assertEqual(self._apply("**first\nsecond**"), "<strong>first\nsecond</strong>")

    def test_text_is_escaped(self):
        """Test that HTML in the source cannot get through the rule."""
        self.assertEqual(
            self._apply("**<i>** & <script>"),
            "<strong>&lt;i&gt;</strong> &amp; &lt;script&gt;",
        )

    def test_markup_input_is_not_escaped_twice(self):
        from markupsafe import Markup

        self.assertEqual(self._apply(Markup("**<em>x</em>**")), "<strong><em>x</em></strong>")

    def test_unmatched_markers(self):
        self.assertEqual(self._apply("**open"), "**open")
        self.assertEqual(self._apply("****"), "****")

    def test_text_mode_leaves_text_alone(self):
        result = self._apply("**bold** <b>", text_mode=True)

        self.assertEqual(result, "**bold** <b>")

    def test_priority(self):
        from phrasal.markup import BoldRule

        self.assertEqual(BoldRule().get_priority(), 1000.0)


class TestMarkupEngine(unittest.TestCase):
    """Tests for rule ordering and engine wiring."""

    def test_rules_run_by_priority(self):
        from phrasal.markup import MarkupEngine, MarkupRule

        calls = []

        class Rule(MarkupRule):
            def __init__(self, name, priority):
                super().__init__()
                self.name = name
                self.priority = priority

            def get_priority(self):
                return self.priority

            def apply(self, text):
                calls.append(self.name)
                return text + self.name

        engine = MarkupEngine([Rule("c", 300.0), Rule("a", 100.0), Rule("b", 200.0)])

        self.assertEqual(engine.apply(""), "abc")
        self.assertEqual(calls, ["a", "b", "c"])
        self.assertEqual([rule.name for rule in engine.get_rules()], ["a", "b", "c"])

    def test_detached_rule_raises(self):
        from phrasal.markup import BoldRule

        with self.assertRaises(RuntimeError):
            BoldRule().apply("**x**")

    def test_bold_output_as_translation_argument(self):
        """Test that rendered markup taints a translation."""
        from markupsafe import Markup

        from phrasal.i18n import Translator, get_locale
        from phrasal.markup import BoldRule, MarkupEngine

        engine = MarkupEngine([BoldRule()])
        translator = Translator(get_locale("en_US"))

        result = translator.translate("%s commented: %s", "<bob>", engine.apply("**LGTM**"))

        self.assertIsInstance(result, Markup)
        self.assertEqual(result, "&lt;bob&gt; commented: <strong>LGTM</strong>")


if __name__ == "__main__":
    unittest.main()
