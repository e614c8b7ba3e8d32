class AttributeOrderError(Exception):
    """Base class for errors raised outside the ordering engine itself."""


class ConfigurationError(AttributeOrderError):
    """The [tool.attribute-order] section cannot be turned into options."""


class ParseDumpError(AttributeOrderError):
    """A parser dump is unreadable, malformed, or points at a missing source."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
