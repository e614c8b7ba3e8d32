"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from attribute_order_linter.domain.constants import (
    DEFAULT_MESSAGE_TEMPLATE,
    RULE_PREFIX,
)
from attribute_order_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds diagnostic messages from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by code or symbol (public API)."""
        rule_id = f"{RULE_PREFIX}{rule_code}"
        entry = registry.get(rule_id)
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(RULE_PREFIX) or rid == f"{RULE_PREFIX}_default":
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def message_template(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> str:
        """Template with {current} and {previous} placeholders; falls back to the built-in one."""
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if entry and entry.get("message_template"):
            return str(entry["message_template"])
        return DEFAULT_MESSAGE_TEMPLATE

    @staticmethod
    def format_message(template: str, current: str, previous: str) -> str:
        """Fill the template. A template with unknown placeholders falls back to the default."""
        try:
            return template.format(current=current, previous=previous)
        except (KeyError, IndexError):
            return DEFAULT_MESSAGE_TEMPLATE.format(current=current, previous=previous)
