"""Domain models for rules and violations."""

from dataclasses import dataclass
from typing import Any, Literal, Protocol

from attribute_order_linter.domain.entities import AttributeNode, EditScript, StartTag

__all__ = [
    "BaseRule",
    "Checkable",
    "Fixable",
    "Violation",
]


@dataclass(frozen=True)
class Violation:
    """
    One ordering inversion: ``node`` should go before ``previous``.

    ``previous`` is the last node the scan accepted, so cascading inversions
    each point back to the still-best-placed attribute.
    """

    code: str
    message: str
    location: str
    node: AttributeNode
    previous: AttributeNode
    tag: StartTag
    fixable: bool = True
    fix_failure_reason: str | None = None
    """Reason why an auto-fix wasn't possible."""
    message_args: tuple[str, ...] | None = None

    @staticmethod
    def _location_from_node(tag: StartTag, node: AttributeNode) -> str:
        """Compute path:line:column for a node."""
        return f"{tag.path}:{node.line}:{node.column}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: AttributeNode,
        previous: AttributeNode,
        tag: StartTag,
        fixable: bool = True,
        fix_failure_reason: str | None = None,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(tag, node),
            node=node,
            previous=previous,
            tag=tag,
            fixable=fixable,
            fix_failure_reason=fix_failure_reason,
            message_args=message_args,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "location": self.location,
            "attribute": self.node.key_text,
            "before": self.previous.key_text,
            "fixable": self.fixable,
            "fix_failure_reason": self.fix_failure_reason,
        }


class Checkable(Protocol):
    """One-and-done check: given a start tag, return violations."""

    code: str
    description: str

    def check(self, tag: StartTag) -> list[Violation]:
        """Interrogate a tag's attributes for ordering breaches."""
        ...


class Fixable(Protocol):
    """Optional capability: rule can produce a fix or human fix instructions."""

    fix_type: Literal["code"]

    def fix(self, violation: Violation) -> EditScript | None:
        """
        Return the edit script resolving the violation, or None when no
        deterministic fix exists.
        """
        ...

    def get_fix_instructions(self, violation: Violation) -> str:
        """Provide human instructions for a manual fix."""
        ...


class BaseRule(Checkable, Fixable, Protocol):
    """One-shot check + fix: Checkable + Fixable combined."""

    code: str
    description: str
    fix_type: Literal["code"]
