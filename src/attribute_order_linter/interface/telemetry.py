"""Console telemetry: styled terminal output mirrored to the project logger."""

import logging

from rich.console import Console
from rich.markup import escape

from attribute_order_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Prints status lines through rich and logs every message."""

    def __init__(self, project_name: str, color: str, welcome_message: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_message = welcome_message
        self.console = Console(stderr=True, highlight=False)
        self.logger = logging.getLogger(project_name.lower().replace(" ", "_"))

    def handshake(self) -> None:
        self.console.print(
            f"[bold {self.color}][{self.project_name}][/] {self.welcome_message}"
        )
        self.logger.info("%s: %s", self.project_name, self.welcome_message)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]warning:[/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
