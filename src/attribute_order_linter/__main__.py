"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os
import sys

from attribute_order_linter.domain.exceptions import ConfigurationError
from attribute_order_linter.infrastructure.di.container import AttributeOrderContainer
from attribute_order_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(
        level=os.environ.get("ATTRS_ORDER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        container = AttributeOrderContainer()
    except ConfigurationError as exc:
        print(f"attrs-order: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        rule=container.get_rule(),
        template_gateway=container.get_template_gateway(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
        guidance_service=container.get_guidance_service(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
