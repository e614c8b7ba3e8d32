"""Terminal reporter implementation for attribute-order audits."""

import json
from typing import TYPE_CHECKING, TypedDict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from attribute_order_linter.domain.constants import ATTRIBUTES_ORDER_CODE
from attribute_order_linter.domain.protocols import AuditReporterProtocol

if TYPE_CHECKING:
    from attribute_order_linter.domain.entities import OrderAuditResult
    from attribute_order_linter.domain.protocols import GuidanceServiceProtocol


class ResultRow(TypedDict):
    """Row of the violations table."""

    location: str
    code: str
    message: str
    fix: str


class TerminalAuditReporter(AuditReporterProtocol):
    """Prints audit results as a rich table, or as JSON."""

    def __init__(
        self,
        guidance_service: "GuidanceServiceProtocol",
        console: Console | None = None,
    ) -> None:
        self._guidance = guidance_service
        self.console = console or Console()

    def build_rows(self, audit_result: "OrderAuditResult") -> list[ResultRow]:
        rows: list[ResultRow] = []
        for file_result in audit_result.files:
            for violation in file_result.violations:
                rows.append(
                    ResultRow(
                        location=violation.location,
                        code=violation.code,
                        message=violation.message,
                        fix="auto" if violation.fixable else "manual",
                    )
                )
        return rows

    def report_audit(self, audit_result: "OrderAuditResult") -> None:
        """Print the violations table and a one-line summary."""
        rows = self.build_rows(audit_result)
        if not rows:
            self.console.print("[bold green]No attribute order violations found.[/]")
            return

        table = Table(
            title=escape(
                f"[{self._guidance.get_display_name(ATTRIBUTES_ORDER_CODE)}] Attribute Order Audit"
            ),
            header_style="bold #007BFF",
        )
        table.add_column("Location", style="#00EEFF")
        table.add_column("Code", style="bold")
        table.add_column("Message")
        table.add_column("Fix", justify="center")
        for row in rows:
            table.add_row(
                escape(row["location"]), row["code"], escape(row["message"]), row["fix"]
            )
        self.console.print(table)
        self.console.print(
            f"{audit_result.violation_count} violation(s) in "
            f"{sum(1 for f in audit_result.files if f.has_violations())} file(s)."
        )

    def report_json(self, audit_result: "OrderAuditResult") -> None:
        self.console.print_json(json.dumps(audit_result.to_dict()))
