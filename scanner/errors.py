"""Exception types raised while scanning a Go module."""

from pathlib import Path
from typing import Optional, Union


class DepMapError(Exception):
    """Base class for all fatal scanning errors."""


class SourceAccessError(DepMapError, OSError):
    """A directory could not be listed or a source file could not be read."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class ParseError(DepMapError):
    """Unexpected token in a package or import clause."""

    def __init__(self, message: str, source: str = "<input>"):
        super().__init__(f"{source}: {message}")
        self.source = source


class LexError(ParseError):
    """The scanner hit an unrecognized symbol or an unterminated string."""


class ConfigError(DepMapError):
    """A configuration file could not be loaded."""
