"""Load [tool.attribute-order] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

from attribute_order_linter.domain.constants import TOOL_SECTION
from attribute_order_linter.domain.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        """Walk up from ``start`` (default: cwd) to the first pyproject.toml."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            candidate = directory / "pyproject.toml"
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.attribute-order] table, or {} when there is none."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return {}
        except toml_lib.TOMLDecodeError as exc:
            raise ConfigurationError(f"{config_file}: {exc}") from exc
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(TOOL_SECTION, {}) or {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"{config_file}: [tool.{TOOL_SECTION}] must be a table.")
        logger.debug("Loaded configuration from %s", config_file)
        return config_dict
