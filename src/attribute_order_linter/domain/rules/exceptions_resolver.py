"""onTop exceptions: pin named attributes to the front of the other-attribute rank."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from attribute_order_linter.domain.constants import BOUND_QUALIFIER_MARKER
from attribute_order_linter.domain.entities import AttributeNode
from attribute_order_linter.domain.rules.order_policy import RankedAttribute


@dataclass(frozen=True)
class ExceptionQualifier:
    """``foo`` matches the plain attribute; ``:foo`` (bound) matches ``v-bind:foo``."""

    name: str
    bound: bool = False

    @classmethod
    def parse(cls, raw: str) -> ExceptionQualifier:
        if raw.startswith(BOUND_QUALIFIER_MARKER):
            return cls(name=raw[len(BOUND_QUALIFIER_MARKER):], bound=True)
        return cls(name=raw, bound=False)

    def matches(self, node: AttributeNode) -> bool:
        return self.name == node.display_name and self.bound == node.is_bind


@dataclass(frozen=True)
class ExceptionSpec:
    """Qualifiers in their required relative order."""

    on_top: tuple[ExceptionQualifier, ...] = ()

    @classmethod
    def parse(cls, on_top: Iterable[str]) -> ExceptionSpec:
        return cls(on_top=tuple(ExceptionQualifier.parse(item) for item in on_top))


class ExceptionResolver:
    """Adjusts validity of two neighbours in the other-attribute rank."""

    def __init__(self, spec: ExceptionSpec | None, other_attr_rank: int | None) -> None:
        self._spec = spec
        self._other_attr_rank = other_attr_rank

    @property
    def enabled(self) -> bool:
        return self._spec is not None

    def adjust_validity(
        self,
        valid: bool,
        current: AttributeNode,
        previous: AttributeNode,
        ranked: Sequence[RankedAttribute],
    ) -> bool:
        """
        Return the validity of ``previous`` followed by ``current``.

        A match may be followed by anything; a match following a non-match is
        invalid; two matches must keep their declared order. Pairs of
        non-matches keep the base validity.
        """
        if self._spec is None:
            return valid

        active = self._active_qualifiers(self._spec, ranked)
        previous_index = self._index_of(previous, active)
        current_index = self._index_of(current, active)

        if current_index == -1:
            if previous_index != -1:
                return True
            return valid
        if previous_index == -1:
            return False
        return current_index > previous_index

    def _active_qualifiers(
        self, spec: ExceptionSpec, ranked: Sequence[RankedAttribute]
    ) -> list[ExceptionQualifier]:
        """Qualifiers that match at least one other-attribute node of this tag."""
        others = [
            item.node for item in ranked if item.rank == self._other_attr_rank
        ]
        return [
            qualifier
            for qualifier in spec.on_top
            if any(qualifier.matches(node) for node in others)
        ]

    @staticmethod
    def _index_of(node: AttributeNode, qualifiers: Sequence[ExceptionQualifier]) -> int:
        for index, qualifier in enumerate(qualifiers):
            if qualifier.matches(node):
                return index
        return -1
