"""CLI entry points - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from attribute_order_linter.domain.constants import ATTRIBUTES_ORDER_CODE, PARSE_DUMP_SUFFIX
from attribute_order_linter.domain.protocols import (
    FileSystemProtocol,
    FixerGatewayProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
    TemplateGatewayProtocol,
)
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule
from attribute_order_linter.infrastructure.reporters import TerminalAuditReporter
from attribute_order_linter.use_cases.apply_fixes import ApplyFixesUseCase
from attribute_order_linter.use_cases.check_order import CheckAttributesOrderUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    rule: AttributesOrderRule
    template_gateway: TemplateGatewayProtocol
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol
    guidance_service: GuidanceServiceProtocol
    reporter: TerminalAuditReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None) -> list[str]:
        """Explicit paths as given, else the current directory (public API)."""
        if paths:
            return [str(p) for p in paths]
        return ["."]

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="attrs-order",
            help=(
                "Enforce the order of attributes in template start tags. Reads "
                f"*{PARSE_DUMP_SUFFIX} parser dumps; 'attrs-order check' audits, "
                "'attrs-order fix' rewrites the template sources."
            ),
            add_completion=False,
        )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Dumps or directories to audit (default: .)"),  # noqa: B008
            output_format: str = typer.Option(
                "table", "--format", help="Output format: table (default) or json"),
        ) -> None:
            """Report attributes that are out of order. Exits 1 when violations are found."""
            if output_format not in ("table", "json"):
                deps.telemetry.error(f"Unknown format '{output_format}'; use table or json.")
                sys.exit(2)
            if output_format == "table":
                deps.telemetry.handshake()
            use_case = CheckAttributesOrderUseCase(
                template_gateway=deps.template_gateway,
                filesystem=deps.filesystem,
                rule=deps.rule,
                telemetry=deps.telemetry,
            )
            audit_result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            if output_format == "json":
                deps.reporter.report_json(audit_result)
            else:
                deps.reporter.report_audit(audit_result)
                if audit_result.has_violations():
                    deps.telemetry.step("Next: run 'attrs-order fix' to reorder automatically.")
            if audit_result.has_violations() or audit_result.failed:
                sys.exit(1)
            sys.exit(0)

        @app.command()
        def fix(
            paths: list[Path] | None = typer.Argument(None, help="Dumps or directories to fix (default: .)"),  # noqa: B008
            no_backup: bool = typer.Option(
                False, "--no-backup", help="Skip creating .bak backup files"),
        ) -> None:
            """Reorder attributes in place. Each fixed tag is rewritten once."""
            deps.telemetry.handshake()
            use_case = ApplyFixesUseCase(
                template_gateway=deps.template_gateway,
                filesystem=deps.filesystem,
                fixer_gateway=deps.fixer_gateway,
                rule=deps.rule,
                telemetry=deps.telemetry,
                create_backups=not no_backup,
            )
            results = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            modified = sum(1 for r in results if r.modified)
            unresolved = sum(r.unresolved_tags for r in results)
            deps.telemetry.step(
                f"Fixed {modified} file(s)" if modified > 0 else "No fixes applied")
            if unresolved:
                deps.telemetry.warning(f"{unresolved} tag(s) still need manual attention.")
                sys.exit(1)
            sys.exit(0)

        @app.command()
        def explain() -> None:
            """Show the rule's description and how to fix its violations by hand."""
            print(deps.guidance_service.get_display_name(ATTRIBUTES_ORDER_CODE))
            print(deps.rule.description)
            print()
            print(deps.guidance_service.get_manual_instructions(ATTRIBUTES_ORDER_CODE))

        return app
