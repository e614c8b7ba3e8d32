"""Check use case: audit parser dumps for attribute order violations."""

from collections.abc import Iterable

from attribute_order_linter.domain.constants import PARSE_DUMP_SUFFIX
from attribute_order_linter.domain.entities import FileAuditResult, OrderAuditResult, SourceDocument
from attribute_order_linter.domain.exceptions import ParseDumpError
from attribute_order_linter.domain.protocols import (
    FileSystemProtocol,
    TelemetryPort,
    TemplateGatewayProtocol,
)
from attribute_order_linter.domain.rules import Violation
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule


class CheckAttributesOrderUseCase:
    """Collects dumps under the given paths and runs the rule over every start tag."""

    def __init__(
        self,
        template_gateway: TemplateGatewayProtocol,
        filesystem: FileSystemProtocol,
        rule: AttributesOrderRule,
        telemetry: TelemetryPort,
    ) -> None:
        self.template_gateway = template_gateway
        self.filesystem = filesystem
        self.rule = rule
        self.telemetry = telemetry

    def collect_dumps(self, paths: Iterable[str]) -> list[str]:
        dumps: list[str] = []
        for path in paths:
            found = self.filesystem.glob_files(path, PARSE_DUMP_SUFFIX)
            if not found:
                self.telemetry.warning(f"No *{PARSE_DUMP_SUFFIX} parser dumps found in {path}")
            dumps.extend(found)
        return dumps

    def execute(self, paths: Iterable[str]) -> OrderAuditResult:
        files: list[FileAuditResult] = []
        failed: list[str] = []
        for dump_path in self.collect_dumps(paths):
            try:
                document = self.template_gateway.load_document(dump_path)
            except ParseDumpError as exc:
                self.telemetry.error(str(exc))
                failed.append(dump_path)
                continue
            self.telemetry.debug(f"Checking {document.path} ({len(document.tags)} tags)")
            files.append(FileAuditResult(path=document.path, violations=self.check_document(document)))
        return OrderAuditResult(files=files, failed=failed)

    def check_document(self, document: SourceDocument) -> list[Violation]:
        violations: list[Violation] = []
        for tag in document.tags:
            violations.extend(self.rule.check(tag))
        return violations
