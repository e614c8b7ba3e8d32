"""Unit tests for ApplyFixesUseCase."""

import unittest
from unittest.mock import MagicMock

from attribute_order_linter.domain.config import ConfigurationLoader
from attribute_order_linter.domain.exceptions import ParseDumpError
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule
from attribute_order_linter.use_cases.apply_fixes import ApplyFixesUseCase
from tests.template_test_utils import build_document, build_tag


def _deps(**config: object) -> dict[str, object]:
    """Return required dependency mocks for ApplyFixesUseCase."""
    return {
        "template_gateway": MagicMock(),
        "filesystem": MagicMock(),
        "fixer_gateway": MagicMock(),
        "rule": AttributesOrderRule(ConfigurationLoader(config).options),
        "telemetry": MagicMock(),
    }


class TestFixTag(unittest.TestCase):
    """In-memory multi-pass fixing of a single tag."""

    def test_fixes_until_clean(self) -> None:
        use_case = ApplyFixesUseCase(**_deps())
        document = build_document('<div foo="1" id="b" v-if="a">')
        tag, text, clean = use_case.fix_tag(document.tags[0], document.text)
        self.assertTrue(clean)
        self.assertEqual(text, '<div v-if="a" id="b" foo="1">')
        self.assertEqual([a.key_text for a in tag.attributes], ["v-if", "id", "foo"])

    def test_clean_tag_is_returned_unchanged(self) -> None:
        use_case = ApplyFixesUseCase(**_deps())
        document = build_document('<div v-if="a" foo="1">')
        tag, text, clean = use_case.fix_tag(document.tags[0], document.text)
        self.assertIs(tag, document.tags[0])
        self.assertEqual(text, document.text)
        self.assertTrue(clean)

    def test_pass_budget_is_respected(self) -> None:
        use_case = ApplyFixesUseCase(**_deps(maxFixPasses=1))
        document = build_document('<div foo="1" id="b" v-if="a">')
        _, text, clean = use_case.fix_tag(document.tags[0], document.text)
        self.assertFalse(clean)
        self.assertEqual(text, '<div id="b" foo="1" v-if="a">')

    def test_unfixable_tag_stops(self) -> None:
        use_case = ApplyFixesUseCase(**_deps())
        document = build_document('<div :foo="1" v-bind="obj" id="a">')
        tag, text, clean = use_case.fix_tag(document.tags[0], document.text)
        self.assertFalse(clean)
        self.assertIs(tag, document.tags[0])


class TestCyclingFixes(unittest.TestCase):
    """A rule whose fixes swap two attributes back and forth never makes progress."""

    def setUp(self) -> None:
        self.document = build_document('<div b="1" a="2">', path="A.vue")
        original = self.document.tags[0]
        swapped = build_tag('<div a="2" b="1">')
        self.rule = MagicMock()
        self.rule.check.return_value = [MagicMock(fixable=True)]
        self.rule.apply_fix.side_effect = [
            (swapped, '<div a="2" b="1">'),
            (original, self.document.text),
        ] * 5
        self.deps = _deps()
        self.deps["rule"] = self.rule

    def test_cycle_is_detected_and_input_kept(self) -> None:
        self.rule.options.max_fix_passes = 5
        use_case = ApplyFixesUseCase(**self.deps)
        tag, text, clean = use_case.fix_tag(self.document.tags[0], self.document.text)
        self.assertFalse(clean)
        self.assertIs(tag, self.document.tags[0])
        self.assertEqual(text, self.document.text)
        self.assertEqual(self.rule.apply_fix.call_count, 2)

    def test_odd_budget_keeps_input(self) -> None:
        self.rule.options.max_fix_passes = 1
        use_case = ApplyFixesUseCase(**self.deps)
        _, text, clean = use_case.fix_tag(self.document.tags[0], self.document.text)
        self.assertFalse(clean)
        self.assertEqual(text, self.document.text)

    def test_unchanged_text_is_not_written_or_backed_up(self) -> None:
        self.rule.options.max_fix_passes = 5
        use_case = ApplyFixesUseCase(**self.deps)
        result = use_case.fix_document(self.document)
        self.assertFalse(result.modified)
        self.assertEqual(result.fixed_tags, 0)
        self.assertEqual(result.unresolved_tags, 1)
        self.deps["filesystem"].copy_file.assert_not_called()
        self.deps["fixer_gateway"].apply_fixes.assert_not_called()


class TestFixDocument(unittest.TestCase):
    """Writing fixed tags back through the fixer gateway."""

    def setUp(self) -> None:
        self.deps = _deps()
        self.deps["fixer_gateway"].apply_fixes.return_value = True

    def test_one_edit_per_changed_tag_and_backup(self) -> None:
        use_case = ApplyFixesUseCase(**self.deps)
        text = '<div foo="1" v-if="a">\n  <span v-if="b">\n  <p b="1" @click="x" a="2">'
        document = build_document(text, path="A.vue")
        result = use_case.fix_document(document)

        self.assertTrue(result.modified)
        self.assertEqual(result.fixed_tags, 2)
        self.assertEqual(result.unresolved_tags, 0)
        self.deps["filesystem"].copy_file.assert_called_once_with("A.vue", "A.vue.bak")
        path, scripts = self.deps["fixer_gateway"].apply_fixes.call_args[0]
        self.assertEqual(path, "A.vue")
        self.assertEqual(len(scripts), 2)
        merged = text
        for script in sorted(scripts, key=lambda s: s.span.start, reverse=True):
            merged = script.apply(merged)
        self.assertEqual(merged, '<div v-if="a" foo="1">\n  <span v-if="b">\n  <p b="1" a="2" @click="x">')

    def test_no_backup_when_disabled(self) -> None:
        use_case = ApplyFixesUseCase(**self.deps, create_backups=False)
        use_case.fix_document(build_document('<div foo="1" v-if="a">', path="A.vue"))
        self.deps["filesystem"].copy_file.assert_not_called()
        self.deps["fixer_gateway"].apply_fixes.assert_called_once()

    def test_clean_document_is_not_written(self) -> None:
        use_case = ApplyFixesUseCase(**self.deps)
        result = use_case.fix_document(build_document('<div v-if="a" foo="1">', path="A.vue"))
        self.assertFalse(result.modified)
        self.deps["fixer_gateway"].apply_fixes.assert_not_called()
        self.deps["filesystem"].copy_file.assert_not_called()

    def test_unresolved_tag_is_counted_and_warned(self) -> None:
        use_case = ApplyFixesUseCase(**self.deps)
        result = use_case.fix_document(build_document('<div :foo="1" v-bind="obj" id="a">', path="A.vue"))
        self.assertEqual(result.unresolved_tags, 1)
        self.deps["telemetry"].warning.assert_called_once()

    def test_execute_skips_unreadable_dumps(self) -> None:
        self.deps["filesystem"].glob_files.return_value = ["bad.attrs.json", "A.vue.attrs.json"]
        self.deps["template_gateway"].load_document.side_effect = [
            ParseDumpError("bad.attrs.json", "invalid JSON"),
            build_document('<div foo="1" v-if="a">', path="A.vue"),
        ]
        results = ApplyFixesUseCase(**self.deps).execute(["."])
        self.assertEqual([r.path for r in results], ["A.vue"])
        self.deps["telemetry"].error.assert_called_once()
