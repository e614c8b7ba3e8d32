"""Configuration for the attributes-order rule. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from attribute_order_linter.domain.constants import DEFAULT_MAX_FIX_PASSES
from attribute_order_linter.domain.entities import Category
from attribute_order_linter.domain.exceptions import ConfigurationError
from attribute_order_linter.domain.rules.exceptions_resolver import ExceptionSpec
from attribute_order_linter.domain.rules.order_policy import (
    DEFAULT_ORDER,
    OrderEntry,
    OrderPolicy,
    RankTable,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {"order", "alphabetical", "otherattrsbind", "otherattrsexceptions", "maxfixpasses"}
)


@dataclass(frozen=True)
class AttributesOrderOptions:
    """Everything the ordering engine reads, compiled once per configuration."""

    order: tuple[OrderEntry, ...]
    rank_table: RankTable
    alphabetical: bool = False
    other_attrs_bind: bool = False
    exceptions: ExceptionSpec | None = None
    max_fix_passes: int = DEFAULT_MAX_FIX_PASSES

    @classmethod
    def default(cls) -> AttributesOrderOptions:
        return cls(order=DEFAULT_ORDER, rank_table=OrderPolicy.build_rank_table(DEFAULT_ORDER))


class ConfigurationLoader:
    """
    Immutable configuration for the linter.

    Created by Infrastructure from the ``[tool.attribute-order]`` dict. Keys
    may be written camelCase (``otherAttrsBind``), snake_case or kebab-case.
    Raises ConfigurationError on invalid values.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self._normalized = {
            self.normalize_key(k): v for k, v in self._config.items() if isinstance(k, str)
        }
        self.validate_config(self._config)
        self._options = self._build_options()

    @staticmethod
    def normalize_key(key: str) -> str:
        return key.replace("_", "").replace("-", "").lower()

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys the rule does not understand."""
        for key in config:
            if self.normalize_key(str(key)) not in _KNOWN_KEYS:
                logger.warning("Configuration Warning: unknown option '%s' is ignored.", key)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def options(self) -> AttributesOrderOptions:
        return self._options

    def _get(self, key: str, default: object = None) -> object:
        return self._normalized.get(self.normalize_key(key), default)

    def _get_bool(self, key: str) -> bool:
        raw = self._get(key, False)
        if not isinstance(raw, bool):
            raise ConfigurationError(f"'{key}' must be a boolean, got {raw!r}.")
        return raw

    def _build_options(self) -> AttributesOrderOptions:
        order = self.parse_order(self._get("order"))
        return AttributesOrderOptions(
            order=order,
            rank_table=OrderPolicy.build_rank_table(order),
            alphabetical=self._get_bool("alphabetical"),
            other_attrs_bind=self._get_bool("otherAttrsBind"),
            exceptions=self.parse_exceptions(self._get("otherAttrsExceptions")),
            max_fix_passes=self._parse_max_fix_passes(self._get("maxFixPasses")),
        )

    @staticmethod
    def parse_order(raw: object) -> tuple[OrderEntry, ...]:
        """
        Turn a list of category names (or lists of names sharing one rank)
        into an order. Every category may appear once across the whole list.
        """
        if raw is None:
            return DEFAULT_ORDER
        if not isinstance(raw, list):
            raise ConfigurationError(f"'order' must be a list, got {raw!r}.")

        seen: set[Category] = set()

        def resolve(name: object) -> Category:
            if not isinstance(name, str):
                raise ConfigurationError(f"Order entries must be strings, got {name!r}.")
            category = Category.from_name(name)
            if category is None:
                raise ConfigurationError(f"Unknown attribute category '{name}'.")
            if category in seen:
                raise ConfigurationError(f"Category '{name}' appears more than once in 'order'.")
            seen.add(category)
            return category

        order: list[OrderEntry] = []
        for entry in raw:
            if isinstance(entry, list):
                if not entry:
                    raise ConfigurationError("Category groups in 'order' must not be empty.")
                order.append(tuple(resolve(name) for name in entry))
            else:
                order.append(resolve(entry))
        return tuple(order)

    @staticmethod
    def parse_exceptions(raw: object) -> ExceptionSpec | None:
        """Parse ``{onTop = [...]}``; None when the option is absent."""
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ConfigurationError(f"'otherAttrsExceptions' must be a table, got {raw!r}.")
        normalized = {ConfigurationLoader.normalize_key(str(k)): v for k, v in raw.items()}
        unknown = set(normalized) - {"ontop"}
        if unknown:
            raise ConfigurationError(
                f"Unknown keys in 'otherAttrsExceptions': {', '.join(sorted(unknown))}."
            )
        on_top = normalized.get("ontop")
        if not isinstance(on_top, list) or not all(isinstance(i, str) for i in on_top):
            raise ConfigurationError("'otherAttrsExceptions.onTop' must be a list of strings.")
        if len(set(on_top)) != len(on_top):
            raise ConfigurationError("'otherAttrsExceptions.onTop' must not repeat entries.")
        return ExceptionSpec.parse(on_top)

    @staticmethod
    def _parse_max_fix_passes(raw: object) -> int:
        if raw is None:
            return DEFAULT_MAX_FIX_PASSES
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
            raise ConfigurationError(f"'max_fix_passes' must be a positive integer, got {raw!r}.")
        return raw
