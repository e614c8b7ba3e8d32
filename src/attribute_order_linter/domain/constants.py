"""
Attribute Order Linter: shared constants
"""

# Rule registry keys look like "attrs.W7101".
RULE_PREFIX: str = "attrs."
ATTRIBUTES_ORDER_CODE: str = "W7101"
ATTRIBUTES_ORDER_SYMBOL: str = "attributes-order"

# Section of pyproject.toml read by ConfigFileLoader: [tool.attribute-order]
TOOL_SECTION: str = "attribute-order"

DEFAULT_MESSAGE_TEMPLATE: str = 'Attribute "{current}" should go before "{previous}".'

DEFAULT_MAX_FIX_PASSES: int = 10

# Directive names, without the "v-" prefix.
BIND_DIRECTIVE: str = "bind"

# Prefix of an onTop qualifier that targets the bound form of an attribute.
BOUND_QUALIFIER_MARKER: str = ":"

PARSE_DUMP_SUFFIX: str = ".attrs.json"
