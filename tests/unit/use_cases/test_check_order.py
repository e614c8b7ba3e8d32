"""Unit tests for CheckAttributesOrderUseCase."""

import unittest
from unittest.mock import MagicMock

from attribute_order_linter.domain.exceptions import ParseDumpError
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule
from attribute_order_linter.use_cases.check_order import CheckAttributesOrderUseCase
from tests.template_test_utils import build_document


class TestCheckAttributesOrderUseCase(unittest.TestCase):
    """Auditing dumps through mocked gateways."""

    def setUp(self) -> None:
        self.template_gateway = MagicMock()
        self.filesystem = MagicMock()
        self.telemetry = MagicMock()
        self.use_case = CheckAttributesOrderUseCase(
            template_gateway=self.template_gateway,
            filesystem=self.filesystem,
            rule=AttributesOrderRule(),
            telemetry=self.telemetry,
        )

    def test_collect_dumps_warns_when_nothing_found(self) -> None:
        self.filesystem.glob_files.side_effect = [["a.vue.attrs.json"], []]
        dumps = self.use_case.collect_dumps(["src", "empty"])
        self.assertEqual(dumps, ["a.vue.attrs.json"])
        self.telemetry.warning.assert_called_once()
        self.assertIn("empty", self.telemetry.warning.call_args[0][0])

    def test_execute_reports_violations_per_file(self) -> None:
        self.filesystem.glob_files.return_value = ["A.vue.attrs.json", "B.vue.attrs.json"]
        self.template_gateway.load_document.side_effect = [
            build_document('<div foo="1" v-if="a"><span id="x" v-for="i in l">', path="A.vue"),
            build_document('<div v-if="a" foo="1">', path="B.vue"),
        ]
        result = self.use_case.execute(["."])
        self.assertEqual([f.path for f in result.files], ["A.vue", "B.vue"])
        self.assertEqual(result.violation_count, 2)
        self.assertEqual(result.files[1].violations, [])
        self.assertTrue(result.has_violations())
        self.assertEqual(result.failed, [])

    def test_execute_records_unreadable_dumps(self) -> None:
        self.filesystem.glob_files.return_value = ["bad.attrs.json"]
        self.template_gateway.load_document.side_effect = ParseDumpError("bad.attrs.json", "invalid JSON")
        result = self.use_case.execute(["."])
        self.assertEqual(result.failed, ["bad.attrs.json"])
        self.assertEqual(result.files, [])
        self.telemetry.error.assert_called_once_with("bad.attrs.json: invalid JSON")

    def test_unfixable_violation_is_marked(self) -> None:
        document = build_document('<div :foo="1" v-bind="obj" id="a">')
        violations = self.use_case.check_document(document)
        self.assertEqual(len(violations), 1)
        self.assertFalse(violations[0].fixable)
