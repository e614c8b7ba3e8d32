"""Attribute classification: map one attribute or directive to its Category."""

from types import MappingProxyType
from typing import Mapping

from attribute_order_linter.domain.entities import AttributeNode, Category

# Non-bind directives, keyed by directive name without the "v-" prefix.
DIRECTIVE_CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        "for": Category.LIST_RENDERING,
        "if": Category.CONDITIONALS,
        "else-if": Category.CONDITIONALS,
        "else": Category.CONDITIONALS,
        "show": Category.CONDITIONALS,
        "cloak": Category.CONDITIONALS,
        "pre": Category.RENDER_MODIFIERS,
        "once": Category.RENDER_MODIFIERS,
        "model": Category.TWO_WAY_BINDING,
        "on": Category.EVENTS,
        "html": Category.CONTENT,
        "text": Category.CONTENT,
        "slot": Category.SLOT,
        "is": Category.DEFINITION,
    }
)

# Plain attributes and statically bound props, keyed by property name.
PROPERTY_CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        "is": Category.DEFINITION,
        "id": Category.GLOBAL,
        "ref": Category.UNIQUE,
        "key": Category.UNIQUE,
        "slot": Category.SLOT,
        "slot-scope": Category.SLOT,
    }
)


class AttributeClassifier:
    """Pure, total classification of attribute nodes."""

    @staticmethod
    def classify(node: AttributeNode) -> Category:
        """
        Return the category of ``node``.

        Directives other than ``v-bind`` are classified by directive name.
        Plain attributes and ``v-bind`` directives are classified by the
        property they set. A spread ``v-bind="obj"`` or a computed key has no
        static property name and lands in OTHER_ATTR; OrderPolicy decides how
        a spread bind is actually ranked.
        """
        if node.is_directive and not node.is_bind:
            return DIRECTIVE_CATEGORIES.get(node.name, Category.OTHER_DIRECTIVES)
        return PROPERTY_CATEGORIES.get(node.property_name, Category.OTHER_ATTR)
