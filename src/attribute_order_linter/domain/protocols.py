from typing import TYPE_CHECKING, Protocol

from attribute_order_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from attribute_order_linter.domain.entities import (
        EditScript,
        OrderAuditResult,
        SourceDocument,
    )


class TelemetryPort(Protocol):
    """Console + log output for use cases and the CLI."""

    def handshake(self) -> None: ...
    def step(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...


class FileSystemProtocol(Protocol):
    def resolve_path(self, path: str) -> str:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def glob_files(self, path: str, suffix: str) -> list[str]:
        """All files under ``path`` whose name ends with ``suffix`` (or ``path`` itself)."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        ...

    def copy_file(self, source: str, destination: str) -> None:
        ...


class TemplateGatewayProtocol(Protocol):
    """Reads parser dumps into SourceDocuments."""

    def load_document(self, dump_path: str) -> "SourceDocument":
        """Raise ParseDumpError when the dump or its source cannot be read."""
        ...


class FixerGatewayProtocol(Protocol):
    def apply_fixes(self, file_path: str, scripts: "list[EditScript]") -> bool:
        """Apply non-overlapping edit scripts to a file. Returns True if the file changed."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for rule registry (message templates, manual instructions)."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...

    def get_display_name(self, rule_code: str) -> str:
        ...


class AuditReporterProtocol(Protocol):
    def report_audit(self, audit_result: "OrderAuditResult") -> None:
        ...
