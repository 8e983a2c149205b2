"""Error types raised by ai-kb"""

from typing import Optional


class AIKBError(Exception):
    """Base class for all ai-kb errors."""

    pass


class ConfigurationError(AIKBError):
    """Invalid application settings or unreadable sections file."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """The sections file does not exist. Fatal for the whole run."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Config file {path} not found")


class PatternResolutionError(AIKBError):
    """A single glob pattern could not be resolved."""

    def __init__(self, pattern: str, section: Optional[str], cause: Exception):
        self.pattern = pattern
        self.section = section
        self.cause = cause
        where = f" in section '{section}'" if section else ""
        super().__init__(f"Error processing pattern '{pattern}'{where}: {cause}")


class FileReadError(AIKBError):
    """A matched file could not be read as UTF-8 text."""

    def __init__(self, path: str, section: Optional[str], cause: Exception):
        self.path = path
        self.section = section
        self.cause = cause
        where = f" in section '{section}'" if section else ""
        super().__init__(f"Could not read {path}{where}: {cause}")


class OutputWriteError(AIKBError):
    """A rendered document could not be written."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")
