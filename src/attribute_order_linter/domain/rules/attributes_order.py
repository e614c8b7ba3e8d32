"""Attributes Order Rule (W7101) - Detection + auto-fix for attribute ordering."""

from collections.abc import Mapping
from typing import Literal

from attribute_order_linter.domain.config import AttributesOrderOptions
from attribute_order_linter.domain.constants import (
    ATTRIBUTES_ORDER_CODE,
    ATTRIBUTES_ORDER_SYMBOL,
)
from attribute_order_linter.domain.entities import EditScript, StartTag
from attribute_order_linter.domain.registry_types import RuleRegistryEntry
from attribute_order_linter.domain.rule_msgs import RuleMsgBuilder
from attribute_order_linter.domain.rules import BaseRule, Violation
from attribute_order_linter.domain.rules.fixer import RotationFixer
from attribute_order_linter.domain.rules.validator import OrderValidator

UNFIXABLE_REASON = (
    "Moving the attribute would change its order relative to a v-bind=\"object\", "
    "which decides which value wins."
)


class AttributesOrderRule(BaseRule):
    """
    Rule for W7101: attributes of a start tag must follow the configured order.

    - Detection: one violation per inversion point, reported against the last
      correctly placed attribute.
    - Fix: rotates the offending attribute in front of that attribute.
    """

    code: str = ATTRIBUTES_ORDER_CODE
    symbol: str = ATTRIBUTES_ORDER_SYMBOL
    description: str = (
        "Attributes Order: attributes and directives must follow the configured order. "
        "Auto-fix: Moves the attribute before the one it should precede."
    )
    fix_type: Literal["code"] = "code"

    def __init__(
        self,
        options: AttributesOrderOptions | None = None,
        registry: Mapping[str, RuleRegistryEntry] | None = None,
    ) -> None:
        self._options = options or AttributesOrderOptions.default()
        self._validator = OrderValidator(self._options)
        self._template = RuleMsgBuilder.message_template(registry or {}, self.code)

    @property
    def options(self) -> AttributesOrderOptions:
        return self._options

    def check(self, tag: StartTag) -> list[Violation]:
        """Check one start tag. Tags with fewer than two ranked attributes never violate."""
        violations: list[Violation] = []
        for inversion in self._validator.validate(tag.attributes):
            current = inversion.node.key_text
            previous = inversion.previous.key_text
            fixable = (
                RotationFixer.new_order(tag.attributes, inversion.node, inversion.previous)
                is not None
            )
            violations.append(
                Violation.from_node(
                    code=self.code,
                    message=RuleMsgBuilder.format_message(self._template, current, previous),
                    node=inversion.node,
                    previous=inversion.previous,
                    tag=tag,
                    fixable=fixable,
                    fix_failure_reason=None if fixable else UNFIXABLE_REASON,
                    message_args=(current, previous),
                )
            )
        return violations

    def fix(self, violation: Violation) -> EditScript | None:
        """Return the rotation that moves ``violation.node`` before ``violation.previous``."""
        if violation.code not in (self.code, self.symbol):
            return None
        attributes = violation.tag.attributes
        if violation.node not in attributes or violation.previous not in attributes:
            return None
        script = RotationFixer.compute_fix(attributes, violation.node, violation.previous)
        return script or None

    def apply_fix(self, violation: Violation, text: str) -> tuple[StartTag, str] | None:
        """
        Apply the fix to the in-memory tag and document text.

        Returns the rotated tag and new text, so the tag can be checked again
        without re-parsing. None when the violation is not fixable.
        """
        if self.fix(violation) is None:
            return None
        return RotationFixer.rotate(violation.tag, violation.node, violation.previous, text)

    def get_fix_instructions(self, violation: Violation) -> str:
        """Provide human instructions for manual fix."""
        instructions = (
            f'Move "{violation.node.key_text}" so that it appears before '
            f'"{violation.previous.key_text}" in <{violation.tag.name}>. '
            "Keep any v-bind=\"object\" next to the attribute it is paired with."
        )
        if not violation.fixable:
            instructions += (
                " No automatic fix is offered: reordering would move a value past a "
                "v-bind=\"object\" and change which one wins, so decide the intended "
                "precedence first."
            )
        return instructions
