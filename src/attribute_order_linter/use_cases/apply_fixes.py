"""Fix use case: rewrite template sources so their attributes follow the configured order."""

from collections.abc import Iterable

from attribute_order_linter.domain.entities import (
    EditScript,
    FixResult,
    SourceDocument,
    StartTag,
    TextEdit,
)
from attribute_order_linter.domain.exceptions import ParseDumpError
from attribute_order_linter.domain.protocols import (
    FileSystemProtocol,
    FixerGatewayProtocol,
    TelemetryPort,
    TemplateGatewayProtocol,
)
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule
from attribute_order_linter.use_cases.check_order import CheckAttributesOrderUseCase


class ApplyFixesUseCase:
    """
    Multi-pass fixer.

    Each tag is fixed in memory one violation at a time (the rotated tag is
    re-checked without re-parsing) until it is clean, the pass budget runs
    out, or the fixes start cycling. A changed attribute span is then written
    back as a single edit.
    """

    def __init__(
        self,
        template_gateway: TemplateGatewayProtocol,
        filesystem: FileSystemProtocol,
        fixer_gateway: FixerGatewayProtocol,
        rule: AttributesOrderRule,
        telemetry: TelemetryPort,
        create_backups: bool = True,
    ) -> None:
        self.template_gateway = template_gateway
        self.filesystem = filesystem
        self.fixer_gateway = fixer_gateway
        self.rule = rule
        self.telemetry = telemetry
        self.create_backups = create_backups
        self._collector = CheckAttributesOrderUseCase(
            template_gateway, filesystem, rule, telemetry
        )

    def execute(self, paths: Iterable[str]) -> list[FixResult]:
        results: list[FixResult] = []
        for dump_path in self._collector.collect_dumps(paths):
            try:
                document = self.template_gateway.load_document(dump_path)
            except ParseDumpError as exc:
                self.telemetry.error(str(exc))
                continue
            results.append(self.fix_document(document))
        return results

    def fix_document(self, document: SourceDocument) -> FixResult:
        scripts: list[EditScript] = []
        text = document.text
        fixed = 0
        unresolved = 0
        for tag in document.tags:
            span = tag.span
            if span is None:
                continue
            before = text[span.start:span.end]
            _, text, clean = self.fix_tag(tag, text)
            if text[span.start:span.end] != before:
                fixed += 1
                # Rotations keep the span length, so offsets outside it never move.
                scripts.append(
                    EditScript(edits=(TextEdit(range=span, replacement=text[span.start:span.end]),))
                )
            if not clean:
                unresolved += 1
                self.telemetry.warning(
                    f"{document.path}: <{tag.name}> is still out of order; "
                    "reorder it by hand (attrs-order explain)"
                )

        if not scripts:
            return FixResult(path=document.path, modified=False, unresolved_tags=unresolved)

        if self.create_backups:
            self.filesystem.copy_file(document.path, f"{document.path}.bak")
        modified = self.fixer_gateway.apply_fixes(document.path, scripts)
        if modified:
            self.telemetry.step(f"Reordered attributes in {fixed} tag(s): {document.path}")
        return FixResult(
            path=document.path, modified=modified, fixed_tags=fixed, unresolved_tags=unresolved
        )

    def fix_tag(self, tag: StartTag, text: str) -> tuple[StartTag, str, bool]:
        """
        Return (tag, text, clean) after fixing the first fixable violation repeatedly.

        Stops when the tag is clean, when nothing more can be fixed, when the
        pass budget is spent, or when a rotation brings back an order already
        seen. An unclean result is the visited order with the fewest
        violations, the earliest one on ties, so the input is kept unless a
        later order is strictly better.
        """
        max_passes = self.rule.options.max_fix_passes
        current = tag
        # attribute span text -> (tag, text, violation count)
        visited: dict[str, tuple[StartTag, str, int]] = {}
        for _ in range(max_passes + 1):
            violations = self.rule.check(current)
            if not violations:
                return current, text, True
            span = current.span
            state = text[span.start:span.end] if span is not None else ""
            if state in visited:
                self.telemetry.debug(f"<{tag.name}>: fixes cycle between orders; stopping")
                break
            visited[state] = (current, text, len(violations))
            fixable = [v for v in violations if v.fixable]
            if not fixable or len(visited) > max_passes:
                break
            applied = self.rule.apply_fix(fixable[0], text)
            if applied is None:
                break
            current, text = applied
        best_tag, best_text, _ = min(visited.values(), key=lambda entry: entry[2])
        return best_tag, best_text, False
