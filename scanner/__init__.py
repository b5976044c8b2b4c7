"""Scanner module for Go import extraction and dependency graph building."""

from .lexer import Scanner, Token, TokenType
from .parser import parse_file, extract_imports
from .discovery import list_source_files
from .builder import GraphBuilder, build_graph
from .errors import DepMapError, SourceAccessError, ParseError, LexError, ConfigError

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "parse_file",
    "extract_imports",
    "list_source_files",
    "GraphBuilder",
    "build_graph",
    "DepMapError",
    "SourceAccessError",
    "ParseError",
    "LexError",
    "ConfigError",
]
