from typing import TYPE_CHECKING, Any, cast

from attribute_order_linter.domain.config import ConfigurationLoader
from attribute_order_linter.domain.rules.attributes_order import AttributesOrderRule
from attribute_order_linter.infrastructure.config_file_loader import ConfigFileLoader
from attribute_order_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from attribute_order_linter.infrastructure.gateways.parsed_template_gateway import (
    ParsedTemplateGateway,
)
from attribute_order_linter.infrastructure.gateways.text_edit_fixer_gateway import (
    TextEditFixerGateway,
)
from attribute_order_linter.infrastructure.reporters import TerminalAuditReporter
from attribute_order_linter.infrastructure.services.guidance_service import GuidanceService
from attribute_order_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from attribute_order_linter.domain.protocols import (
        FileSystemProtocol,
        FixerGatewayProtocol,
        GuidanceServiceProtocol,
        TelemetryPort,
        TemplateGatewayProtocol,
    )


class AttributeOrderContainer:
    """Dependency Injection Container for the attribute order linter."""

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort",
            ProjectTelemetry("ATTRS-ORDER", "cyan", "Attribute order check online"),
        )
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("ParsedTemplateGateway", ParsedTemplateGateway(filesystem))
        self.register_singleton("TextEditFixerGateway", TextEditFixerGateway(filesystem))
        self.register_singleton(
            "AttributesOrderRule",
            AttributesOrderRule(config_loader.options, guidance_service.get_registry()),
        )
        self.register_singleton("TerminalAuditReporter", TerminalAuditReporter(guidance_service))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the immutable configuration."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        """Return the rule registry service."""
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_template_gateway(self) -> "TemplateGatewayProtocol":
        return cast("TemplateGatewayProtocol", self.get("ParsedTemplateGateway"))

    def get_fixer_gateway(self) -> "FixerGatewayProtocol":
        return cast("FixerGatewayProtocol", self.get("TextEditFixerGateway"))

    def get_rule(self) -> AttributesOrderRule:
        return cast(AttributesOrderRule, self.get("AttributesOrderRule"))

    def get_reporter(self) -> TerminalAuditReporter:
        return cast(TerminalAuditReporter, self.get("TerminalAuditReporter"))
