"""GraphViz DOT exporter for dependency graphs."""

import re
from typing import List

from graph.model import DependencyGraph


# Characters in directory names that are not valid in a bare DOT identifier
_SEPARATORS = re.compile(r"[/\\\-]")
_BARE_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def to_dot(graph: DependencyGraph, name: str = "G") -> str:
    """
    Convert a dependency graph to a GraphViz digraph.

    Each edge becomes one ``src -> dst`` line. Lines are sorted, and edges
    that render identically after sanitizing are written once.

    Args:
        graph: The dependency graph to export.
        name: Name of the digraph.

    Returns:
        DOT source text.
    """
    lines = {
        f"{sanitize_id(source)} -> {sanitize_id(target)}"
        for source, target in graph.iter_edges()
    }

    output: List[str] = [f"digraph {name} {{"]
    output.extend(sorted(lines))
    output.append("}")
    return "\n".join(output)


def sanitize_id(directory: str) -> str:
    """
    Convert a directory path to a DOT node ID.

    Path separators and hyphens become underscores. Names that still are not
    bare identifiers (the root ``.``, names starting with a digit) are quoted.
    """
    sanitized = _SEPARATORS.sub("_", directory)
    if _BARE_ID.match(sanitized):
        return sanitized
    escaped = sanitized.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
