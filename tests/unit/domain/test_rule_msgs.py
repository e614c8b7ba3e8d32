"""Unit tests for RuleMsgBuilder (domain/rule_msgs.py)."""

import unittest

from attribute_order_linter.domain.constants import DEFAULT_MESSAGE_TEMPLATE, RULE_PREFIX
from attribute_order_linter.domain.rule_msgs import RuleMsgBuilder


def _registry(*entries: tuple[str, dict[str, object]]) -> dict[str, object]:
    """Build a registry dict from (key, value) pairs."""
    return dict(entries)


class TestRuleMsgBuilderGetEntry(unittest.TestCase):
    """Tests for RuleMsgBuilder.get_entry."""

    def setUp(self) -> None:
        self.registry = _registry(
            (f"{RULE_PREFIX}W7101", {
                "symbol": "attributes-order",
                "display_name": "Attributes Order",
                "message_template": "{current} before {previous}",
            }),
        )

    def test_returns_entry_by_code(self) -> None:
        entry = RuleMsgBuilder.get_entry(self.registry, "W7101")
        self.assertIsNotNone(entry)
        self.assertEqual(entry.get("symbol"), "attributes-order")

    def test_returns_entry_by_symbol(self) -> None:
        entry = RuleMsgBuilder.get_entry(self.registry, "attributes-order")
        self.assertEqual(entry.get("display_name"), "Attributes Order")

    def test_returns_none_for_unknown_rule(self) -> None:
        self.assertIsNone(RuleMsgBuilder.get_entry(self.registry, "W0000"))


class TestRuleMsgBuilderMessages(unittest.TestCase):
    """Tests for message_template and format_message."""

    def test_template_from_registry(self) -> None:
        registry = _registry((f"{RULE_PREFIX}W7101", {"message_template": "{current}/{previous}"}))
        self.assertEqual(RuleMsgBuilder.message_template(registry, "W7101"), "{current}/{previous}")

    def test_default_template_when_missing(self) -> None:
        self.assertEqual(RuleMsgBuilder.message_template({}, "W7101"), DEFAULT_MESSAGE_TEMPLATE)

    def test_format_message(self) -> None:
        self.assertEqual(
            RuleMsgBuilder.format_message(DEFAULT_MESSAGE_TEMPLATE, "v-if", "id"),
            'Attribute "v-if" should go before "id".',
        )

    def test_unknown_placeholder_falls_back_to_default(self) -> None:
        self.assertEqual(
            RuleMsgBuilder.format_message("{attribute} is misplaced", "a", "b"),
            'Attribute "a" should go before "b".',
        )
