"""Rotation fixer: move an offending attribute in front of the node it should precede."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from attribute_order_linter.domain.entities import (
    AttributeNode,
    EditScript,
    StartTag,
    TextEdit,
)


class RotationFixer:
    """
    Computes the smallest contiguous reordering for one inversion.

    A spread ``v-bind="obj"`` and an adjacent plain attribute or bind form a
    cluster, and ``node`` moves up together with its cluster. The block runs
    from ``previous`` to the end of ``node``'s cluster; the moving part goes
    first and the nodes it passes keep their relative order. A rotation that
    would carry a bound value past a spread bind, or a spread bind past a bound
    value, changes which value wins and is never produced. Each slot receives
    its new occupant's text; whitespace between slots and text outside the
    block are untouched.
    """

    @staticmethod
    def is_linked(left: AttributeNode, right: AttributeNode) -> bool:
        """Whether the relative order of the two nodes decides which bound value wins."""
        return (left.is_spread_bind and right.is_plain_or_bind) or (
            right.is_spread_bind and left.is_plain_or_bind
        )

    @classmethod
    def cluster_bounds(
        cls, attributes: Sequence[AttributeNode], index: int
    ) -> tuple[int, int]:
        """Inclusive bounds of the cluster containing ``attributes[index]``."""
        start = index
        while start > 0 and cls.is_linked(attributes[start - 1], attributes[start]):
            start -= 1
        end = index
        while end + 1 < len(attributes) and cls.is_linked(attributes[end], attributes[end + 1]):
            end += 1
        return start, end

    @classmethod
    def new_order(
        cls,
        attributes: Sequence[AttributeNode],
        node: AttributeNode,
        previous: AttributeNode,
    ) -> tuple[list[AttributeNode], list[AttributeNode]] | None:
        """
        Return (slots, occupants): the original block and its rotated order.

        None when ``previous`` sits in ``node``'s cluster, or when the moving
        part would cross a node whose merge order with it matters.
        """
        attributes = list(attributes)
        first = attributes.index(previous)
        node_start, node_end = cls.cluster_bounds(attributes, attributes.index(node))
        if node_start <= first:
            return None
        moving = attributes[node_start:node_end + 1]
        passed = attributes[first:node_start]
        if any(cls.is_linked(m, p) for m in moving for p in passed):
            return None
        # prev, v-bind, :foo -> v-bind, :foo, prev
        return attributes[first:node_end + 1], moving + passed

    @classmethod
    def compute_fix(
        cls,
        attributes: Sequence[AttributeNode],
        node: AttributeNode,
        previous: AttributeNode,
    ) -> EditScript | None:
        """One text replacement per slot of the rotated block."""
        order = cls.new_order(attributes, node, previous)
        if order is None:
            return None
        slots, occupants = order
        return EditScript(
            edits=tuple(
                TextEdit(range=slot.range, replacement=occupant.text)
                for slot, occupant in zip(slots, occupants)
            )
        )

    @classmethod
    def rotate(
        cls,
        tag: StartTag,
        node: AttributeNode,
        previous: AttributeNode,
        text: str,
    ) -> tuple[StartTag, str] | None:
        """
        Apply the fix for one inversion to ``tag`` and the document ``text``.

        Returns the rotated tag, with ranges and positions recomputed against
        the new text, together with that text.
        """
        order = cls.new_order(tag.attributes, node, previous)
        script = cls.compute_fix(tag.attributes, node, previous)
        if order is None or script is None:
            return None
        slots, occupants = order
        new_text = script.apply(text)

        moved: list[AttributeNode] = []
        cursor = slots[0].range.start
        for index, occupant in enumerate(occupants):
            line, column = cls.position_of(new_text, cursor)
            moved.append(
                dataclasses.replace(occupant.moved_to(cursor), line=line, column=column)
            )
            cursor += len(occupant.text)
            if index + 1 < len(slots):
                cursor += slots[index + 1].range.start - slots[index].range.end

        first = tag.index_of(slots[0])
        attributes = (
            tag.attributes[:first] + tuple(moved) + tag.attributes[first + len(slots):]
        )
        return dataclasses.replace(tag, attributes=attributes), new_text

    @staticmethod
    def position_of(text: str, offset: int) -> tuple[int, int]:
        """1-based line and 0-based column of ``offset``."""
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1)
        return line, column
