from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from attribute_order_linter.domain.constants import BIND_DIRECTIVE

if TYPE_CHECKING:
    from attribute_order_linter.domain.rules import Violation


class Category(Enum):
    """Closed set of attribute categories an order policy ranks."""
    DEFINITION = "DEFINITION"
    LIST_RENDERING = "LIST_RENDERING"
    CONDITIONALS = "CONDITIONALS"
    RENDER_MODIFIERS = "RENDER_MODIFIERS"
    GLOBAL = "GLOBAL"
    UNIQUE = "UNIQUE"
    SLOT = "SLOT"
    TWO_WAY_BINDING = "TWO_WAY_BINDING"
    OTHER_DIRECTIVES = "OTHER_DIRECTIVES"
    OTHER_ATTR = "OTHER_ATTR"
    EVENTS = "EVENTS"
    CONTENT = "CONTENT"

    @classmethod
    def from_name(cls, raw: str) -> Category | None:
        """Resolve 'other-attr', 'OTHER_ATTR' or 'other_attr' to a member; None if unknown."""
        key = raw.strip().upper().replace("-", "_")
        return cls.__members__.get(key)


@dataclass(frozen=True)
class SourceRange:
    """Half-open [start, end) character offsets into a template source."""
    start: int
    end: int

    def shifted(self, delta: int) -> SourceRange:
        return SourceRange(self.start + delta, self.end + delta)

    def overlaps(self, other: SourceRange) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class AttributeNode:
    """
    One attribute or directive of a start tag, as produced by the template parser.

    For directives ``name`` is the directive name without its ``v-`` prefix
    (``bind`` for both ``v-bind:foo`` and ``:foo``, ``on`` for ``@click``).
    For plain attributes it is the attribute key. ``text`` and ``key_text`` are
    the source slices covered by ``range`` and ``key_range``.
    """
    is_directive: bool
    name: str
    range: SourceRange
    key_range: SourceRange
    text: str
    key_text: str
    argument: str | None = None
    argument_is_dynamic: bool = False
    modifiers: tuple[str, ...] = ()
    line: int = 1
    column: int = 0

    @property
    def is_bind(self) -> bool:
        return self.is_directive and self.name == BIND_DIRECTIVE

    @property
    def is_spread_bind(self) -> bool:
        """``v-bind="object"``: a bind directive without an argument."""
        return self.is_bind and self.argument is None

    @property
    def is_plain_or_bind(self) -> bool:
        return not self.is_directive or self.is_bind

    @property
    def has_static_name(self) -> bool:
        """False for computed keys such as ``:[name]`` whose name is only known at runtime."""
        return not (self.is_directive and self.argument_is_dynamic)

    @property
    def property_name(self) -> str:
        """Name of the attribute or prop this node sets; '' when not statically known."""
        if not self.is_directive:
            return self.name
        if self.is_bind and self.argument is not None and not self.argument_is_dynamic:
            return self.argument
        return ""

    @property
    def display_name(self) -> str:
        """Name used for alphabetical comparison and exception matching."""
        if not self.is_directive:
            return self.name
        if self.is_bind:
            return self.argument or ""
        text = f"v-{self.name}"
        if self.argument is not None:
            text += f":{self.argument}"
        for modifier in self.modifiers:
            text += f".{modifier}"
        return text

    def moved_to(self, start: int) -> AttributeNode:
        """Return a copy whose text starts at ``start``; line/column are left to the caller."""
        delta = start - self.range.start
        return dataclasses.replace(
            self,
            range=self.range.shifted(delta),
            key_range=self.key_range.shifted(delta),
        )


@dataclass(frozen=True)
class StartTag:
    """A start tag and its attributes in source order."""
    name: str
    attributes: tuple[AttributeNode, ...]
    path: str = ""

    def index_of(self, node: AttributeNode) -> int:
        return self.attributes.index(node)

    @property
    def span(self) -> SourceRange | None:
        """Range from the first attribute's start to the last attribute's end."""
        if not self.attributes:
            return None
        return SourceRange(self.attributes[0].range.start, self.attributes[-1].range.end)


@dataclass(frozen=True)
class TextEdit:
    """Replace the text covered by ``range`` with ``replacement``."""
    range: SourceRange
    replacement: str


@dataclass(frozen=True)
class EditScript:
    """
    Ordered text replacements describing one attribute rotation.

    Edits never overlap, so they can be applied back to front against the
    original text without offset bookkeeping.
    """
    edits: tuple[TextEdit, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.edits)

    @property
    def span(self) -> SourceRange | None:
        if not self.edits:
            return None
        return SourceRange(
            min(e.range.start for e in self.edits),
            max(e.range.end for e in self.edits),
        )

    def apply(self, text: str) -> str:
        """Return ``text`` with every edit applied."""
        result = text
        for edit in sorted(self.edits, key=lambda e: e.range.start, reverse=True):
            result = result[: edit.range.start] + edit.replacement + result[edit.range.end:]
        return result


@dataclass(frozen=True)
class SourceDocument:
    """A template source file together with the start tags its parser reported."""
    path: str
    text: str
    tags: tuple[StartTag, ...] = ()


@dataclass(frozen=True)
class FileAuditResult:
    """Violations found in one source document."""
    path: str
    violations: list[Violation] = field(default_factory=list)

    def has_violations(self) -> bool:
        return bool(self.violations)


@dataclass(frozen=True)
class OrderAuditResult:
    """Result of checking a set of parse dumps."""
    files: list[FileAuditResult] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def has_violations(self) -> bool:
        return any(f.has_violations() for f in self.files)

    @property
    def violation_count(self) -> int:
        return sum(len(f.violations) for f in self.files)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the JSON report."""
        return {
            "violation_count": self.violation_count,
            "failed": list(self.failed),
            "files": [
                {
                    "path": f.path,
                    "violations": [v.to_dict() for v in f.violations],
                }
                for f in self.files
            ],
        }


@dataclass(frozen=True)
class FixResult:
    """Outcome of fixing one source document."""
    path: str
    modified: bool
    fixed_tags: int = 0
    unresolved_tags: int = 0
