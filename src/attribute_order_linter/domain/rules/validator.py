"""Single-pass scan of a ranked attribute sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from attribute_order_linter.domain.entities import AttributeNode
from attribute_order_linter.domain.rules.exceptions_resolver import ExceptionResolver
from attribute_order_linter.domain.rules.order_policy import OrderPolicy, RankedAttribute

if TYPE_CHECKING:
    from attribute_order_linter.domain.config import AttributesOrderOptions


@dataclass(frozen=True)
class Inversion:
    """``node`` should go before ``previous``."""

    node: AttributeNode
    previous: AttributeNode


class OrderValidator:
    """
    Walks the ranked attributes of a tag once, keeping the last accepted node.

    An invalid node is reported against the last accepted node and does not
    replace it, so every inversion point is reported once with a local
    "move before X" suggestion.
    """

    def __init__(self, options: "AttributesOrderOptions") -> None:
        self._options = options
        self._resolver = ExceptionResolver(
            options.exceptions, options.rank_table.other_attr_rank
        )

    def validate(self, attributes: Sequence[AttributeNode]) -> list[Inversion]:
        ranked = OrderPolicy.ranked_attributes(attributes, self._options.rank_table)
        if len(ranked) <= 1:
            return []

        inversions: list[Inversion] = []
        previous = ranked[0]
        for current in ranked[1:]:
            if self.is_valid(previous, current, ranked):
                previous = current
            else:
                inversions.append(Inversion(node=current.node, previous=previous.node))
        return inversions

    def is_valid(
        self,
        previous: RankedAttribute,
        current: RankedAttribute,
        ranked: Sequence[RankedAttribute],
    ) -> bool:
        """Whether ``current`` may follow ``previous``."""
        options = self._options
        valid = previous.rank <= current.rank
        if valid and options.alphabetical and previous.rank == current.rank:
            valid = self.is_alphabetical(previous.node, current.node)

        other_rank = options.rank_table.other_attr_rank
        if previous.rank == current.rank and current.rank == other_rank:
            if options.other_attrs_bind:
                valid = previous.node.is_directive <= current.node.is_directive
                if (
                    valid
                    and options.alphabetical
                    and previous.node.is_directive == current.node.is_directive
                ):
                    valid = self.is_alphabetical(previous.node, current.node)

            valid = self._resolver.adjust_validity(
                valid, current.node, previous.node, ranked
            )
        return valid

    @staticmethod
    def is_alphabetical(previous: AttributeNode, current: AttributeNode) -> bool:
        """
        Display names must not decrease. With equal names a bind directive may
        follow the plain form but not precede it. Computed keys are not compared.
        """
        if not (previous.has_static_name and current.has_static_name):
            return True
        previous_name = previous.display_name
        current_name = current.display_name
        if previous_name == current_name:
            return previous.is_bind <= current.is_bind
        return previous_name < current_name
