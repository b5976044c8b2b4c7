"""Exporters for converting graph to various output formats."""

from .dot_exporter import to_dot
from .mermaid_exporter import to_mermaid
from .json_exporter import to_json

__all__ = ["to_dot", "to_mermaid", "to_json"]
