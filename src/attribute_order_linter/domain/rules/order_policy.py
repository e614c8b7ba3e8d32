"""Order policy: compile an order list into ranks and rank a tag's attributes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from attribute_order_linter.domain.entities import AttributeNode, Category
from attribute_order_linter.domain.rules.classification import AttributeClassifier

OrderEntry = Union[Category, Sequence[Category]]

DEFAULT_ORDER: tuple[OrderEntry, ...] = (
    Category.DEFINITION,
    Category.LIST_RENDERING,
    Category.CONDITIONALS,
    Category.RENDER_MODIFIERS,
    Category.GLOBAL,
    (Category.UNIQUE, Category.SLOT),
    Category.TWO_WAY_BINDING,
    Category.OTHER_DIRECTIVES,
    Category.OTHER_ATTR,
    Category.EVENTS,
    Category.CONTENT,
)


@dataclass(frozen=True)
class RankTable:
    """Category -> rank. Categories missing from the table are unranked."""

    ranks: Mapping[Category, int]

    def rank_of(self, category: Category) -> int | None:
        return self.ranks.get(category)

    @property
    def other_attr_rank(self) -> int | None:
        return self.ranks.get(Category.OTHER_ATTR)


@dataclass(frozen=True)
class RankedAttribute:
    """An attribute that takes part in ordering checks, with its rank."""

    node: AttributeNode
    rank: int


class OrderPolicy:
    """Builds rank tables and ranks attribute sequences against them."""

    @staticmethod
    def build_rank_table(order: Sequence[OrderEntry]) -> RankTable:
        """Rank grows with position in ``order``; members of a group share a rank."""
        ranks: dict[Category, int] = {}
        for position, entry in enumerate(order):
            if isinstance(entry, Category):
                ranks[entry] = position
            else:
                for category in entry:
                    ranks[category] = position
        return RankTable(ranks=MappingProxyType(ranks))

    @staticmethod
    def rank(node: AttributeNode, table: RankTable) -> int | None:
        """Rank of ``node`` by its own category, ignoring spread-bind inheritance."""
        return table.rank_of(AttributeClassifier.classify(node))

    @staticmethod
    def is_coupled_spread_bind(
        attributes: Sequence[AttributeNode], index: int
    ) -> bool:
        """
        True when ``attributes[index]`` is a spread bind sitting next to a plain
        attribute or another bind.

        The merge result of ``v-bind="obj"`` and a neighbouring ``foo`` or
        ``:foo`` depends on their relative order, so such a spread bind is kept
        out of ordering checks.
        """
        node = attributes[index]
        if not node.is_spread_bind:
            return False
        if index > 0 and attributes[index - 1].is_plain_or_bind:
            return True
        return index + 1 < len(attributes) and attributes[index + 1].is_plain_or_bind

    @classmethod
    def ranked_attributes(
        cls, attributes: Sequence[AttributeNode], table: RankTable
    ) -> list[RankedAttribute]:
        """
        Return the attributes that take part in ordering checks, in source order.

        Coupled spread binds are dropped first. A remaining spread bind takes
        the rank of the next plain or argumented bind node after it; with none
        it is unranked. Unranked nodes are skipped.
        """
        filtered = [
            node
            for index, node in enumerate(attributes)
            if not cls.is_coupled_spread_bind(attributes, index)
        ]

        results: list[RankedAttribute] = []
        for index, node in enumerate(filtered):
            rank = cls._rank_in_context(filtered, index, table)
            if rank is None:
                continue
            results.append(RankedAttribute(node=node, rank=rank))
        return results

    @classmethod
    def _rank_in_context(
        cls, filtered: Sequence[AttributeNode], index: int, table: RankTable
    ) -> int | None:
        node = filtered[index]
        if not node.is_spread_bind:
            return cls.rank(node, table)
        for next_index in range(index + 1, len(filtered)):
            candidate = filtered[next_index]
            if candidate.is_plain_or_bind and not candidate.is_spread_bind:
                return cls.rank(candidate, table)
        return None
